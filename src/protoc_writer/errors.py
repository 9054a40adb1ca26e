from __future__ import annotations


class ProtoValidationError(Exception):
    """Raised when a proto definition violates a structural rule."""


class SchemaLoadError(Exception):
    """Raised when a schema description cannot be turned into a ProtoFile."""
