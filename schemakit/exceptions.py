"""Exceptions for column schema metadata."""


class SchemaError(Exception):
    """Base exception for schema metadata errors."""

    pass


class UnsupportedModificationError(SchemaError, TypeError):
    """Raised when a read-only schema view is structurally modified."""

    pass


class InvalidEnumerationValueError(SchemaError, ValueError):
    """Raised when text does not name a member of a schema enumeration."""

    def __init__(self, enum_name: str, value: object) -> None:
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Invalid {enum_name} value: {value!r}")
