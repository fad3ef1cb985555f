"""Column schema metadata for database clients."""

from .column import EMPTY_INDEX_TYPES, ColumnSchema, IndexTypeSet, freeze_index_types
from .config import Settings, load_settings
from .exceptions import (
    InvalidEnumerationValueError,
    SchemaError,
    UnsupportedModificationError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_logging_from_settings,
    setup_test_logging,
)
from .types import Environment, IndexType, ValueType

__all__ = [
    "ColumnSchema",
    "IndexTypeSet",
    "EMPTY_INDEX_TYPES",
    "freeze_index_types",
    "ValueType",
    "IndexType",
    "Environment",
    "SchemaError",
    "UnsupportedModificationError",
    "InvalidEnumerationValueError",
    "Settings",
    "load_settings",
    "get_logger",
    "setup_logging",
    "setup_logging_from_settings",
    "setup_test_logging",
]
