"""Service layer — wraps the pure domain pipeline in ServiceResult contracts.

INVARIANT: Service methods return ServiceResult; degenerate input is a
result, never an exception.
"""
