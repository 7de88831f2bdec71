"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, panpizza.toml only contains
overrides. An empty file (or no file) reproduces the 28 x 40 cm default pan.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, Field

from panpizza.domain.types import UnitSystem


class DefaultsConfig(BaseModel):
    """[defaults] section — recipe inputs used when a CLI option is omitted."""

    model_config = {"frozen": True}

    unit_system: UnitSystem = UnitSystem.METRIC
    width: float = 28
    length: float = 40
    pizza_count: int = 1


PageSize = Literal["A4", "A5", "Letter", "Legal"]
PAGE_SIZES: tuple[str, ...] = get_args(PageSize)


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    page_size: PageSize = "A4"
    title: str = "Pan Pizza Recipe"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

