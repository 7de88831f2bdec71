"""panpizza — baker's-percentage pan pizza dough calculator."""

__version__ = "0.1.0"
