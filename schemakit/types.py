"""Common type definitions for schemakit."""

from enum import Enum
from typing import TypeVar

from .exceptions import InvalidEnumerationValueError
from .log import get_logger

logger = get_logger(__name__)

_E = TypeVar("_E", bound=Enum)


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


def _parse_member(enum_cls: type[_E], value: object) -> _E:
    """Resolve a member or its case-insensitive value/name text."""
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if key in (str(member.value).lower(), member.name.lower()):
                return member

    logger.debug(f"Rejected {enum_cls.__name__} value: {value!r}")
    raise InvalidEnumerationValueError(enum_cls.__name__, value)


class ValueType(str, Enum):
    """Column value types."""

    STRING = "string"
    BOOL = "bool"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    TIMESTAMP = "timestamp"
    GEOMETRY = "geometry"
    BLOB = "blob"
    STRING_ARRAY = "string_array"
    BOOL_ARRAY = "bool_array"
    BYTE_ARRAY = "byte_array"
    SHORT_ARRAY = "short_array"
    INTEGER_ARRAY = "integer_array"
    LONG_ARRAY = "long_array"
    FLOAT_ARRAY = "float_array"
    DOUBLE_ARRAY = "double_array"
    TIMESTAMP_ARRAY = "timestamp_array"
    MICRO_TIMESTAMP = "micro_timestamp"
    NANO_TIMESTAMP = "nano_timestamp"

    @classmethod
    def parse(cls, value: object) -> "ValueType":
        """Resolve a value type from a member or its text.

        Args:
            value: ValueType member, or its value/name in any case

        Returns:
            Matching ValueType

        Raises:
            InvalidEnumerationValueError: If no member matches
        """
        return _parse_member(cls, value)

    @property
    def is_array(self) -> bool:
        """Check if this is an array type."""
        return self.value.endswith("_array")

    @property
    def element_type(self) -> "ValueType | None":
        """Get the element type of an array type, None for scalars."""
        if not self.is_array:
            return None
        return ValueType(self.value.removesuffix("_array"))

    @property
    def is_timestamp(self) -> bool:
        """Check if this is a scalar timestamp type of any precision."""
        return self in (
            ValueType.TIMESTAMP,
            ValueType.MICRO_TIMESTAMP,
            ValueType.NANO_TIMESTAMP,
        )


class IndexType(str, Enum):
    """Column index kinds."""

    TREE = "tree"
    HASH = "hash"
    SPATIAL = "spatial"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: object) -> "IndexType":
        """Resolve an index type from a member or its text.

        Raises:
            InvalidEnumerationValueError: If no member matches
        """
        return _parse_member(cls, value)
