"""Column schema metadata."""

from collections.abc import Iterable, Iterator, Set
from dataclasses import dataclass
from typing import Any, NoReturn

from .exceptions import UnsupportedModificationError
from .log import get_logger
from .types import IndexType, ValueType

logger = get_logger(__name__)

_DECLARATION_ORDER: dict[object, int] = {
    index_type: order for order, index_type in enumerate(IndexType)
}


def _declaration_key(member: object) -> int:
    return _DECLARATION_ORDER.get(member, len(_DECLARATION_ORDER))


class IndexTypeSet(Set[IndexType]):
    """Read-only set of index types.

    Compares equal to any set with the same members and iterates in
    IndexType declaration order. Every mutating method raises
    UnsupportedModificationError; set algebra returns new instances.
    """

    __slots__ = ("_members", "_ordered")

    def __new__(cls, members: Iterable[IndexType] = ()) -> "IndexTypeSet":
        self = super().__new__(cls)
        frozen = frozenset(members)
        object.__setattr__(self, "_members", frozen)
        ordered = tuple(sorted(frozen, key=_declaration_key))
        object.__setattr__(self, "_ordered", ordered)
        return self

    def __init__(self, members: Iterable[IndexType] = ()) -> None:
        # State is fixed in __new__, like frozenset.
        pass

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[IndexType]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._members)

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._ordered)!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._ordered,))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        self._reject(f"set attribute {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        self._reject(f"delete attribute {name!r}")

    def _reject(self, operation: str) -> NoReturn:
        logger.debug(f"Rejected {operation} on read-only {self!r}")
        raise UnsupportedModificationError(
            f"Cannot {operation}: index type set is read-only"
        )

    def add(self, *args: Any) -> NoReturn:
        self._reject("add")

    def discard(self, *args: Any) -> NoReturn:
        self._reject("discard")

    def remove(self, *args: Any) -> NoReturn:
        self._reject("remove")

    def pop(self, *args: Any) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def update(self, *args: Any) -> NoReturn:
        self._reject("update")

    def difference_update(self, *args: Any) -> NoReturn:
        self._reject("difference_update")

    def intersection_update(self, *args: Any) -> NoReturn:
        self._reject("intersection_update")

    def symmetric_difference_update(self, *args: Any) -> NoReturn:
        self._reject("symmetric_difference_update")

    def __ior__(self, other: Any) -> NoReturn:
        self._reject("|=")

    def __iand__(self, other: Any) -> NoReturn:
        self._reject("&=")

    def __isub__(self, other: Any) -> NoReturn:
        self._reject("-=")

    def __ixor__(self, other: Any) -> NoReturn:
        self._reject("^=")


EMPTY_INDEX_TYPES = IndexTypeSet()


def freeze_index_types(
    index_types: Iterable[IndexType] | None,
) -> IndexTypeSet | None:
    """Normalize caller-supplied index types into read-only storage.

    Args:
        index_types: Index types, or None when unspecified

    Returns:
        None when unspecified, EMPTY_INDEX_TYPES when empty, otherwise an
        IndexTypeSet holding a copy of the distinct members
    """
    if index_types is None:
        return None

    if isinstance(index_types, IndexTypeSet):
        return index_types if index_types else EMPTY_INDEX_TYPES

    frozen = IndexTypeSet(index_types)
    return frozen if frozen else EMPTY_INDEX_TYPES


@dataclass(frozen=True)
class ColumnSchema:
    """Schema information of a single column.

    Every attribute is optional and None means "not specified". For index
    types an empty set is a distinct, specified state: the column has no
    index. Values are not validated against each other, e.g. an index type
    is accepted regardless of the column type.

    Attributes:
        name: Column name
        value_type: Column value type
        nullable: True if no NOT NULL constraint is set, False if it is set
        index_types: Index types. Accepts any iterable; stored as an
            IndexTypeSet, or None when unspecified
    """

    name: str | None = None
    value_type: ValueType | None = None
    nullable: bool | None = None
    index_types: Iterable[IndexType] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "index_types", freeze_index_types(self.index_types))

    @property
    def has_index_types(self) -> bool:
        """Check if index types are specified, including an empty set."""
        return self.index_types is not None

    @property
    def is_fully_specified(self) -> bool:
        """Check if every attribute is specified."""
        return (
            self.name is not None
            and self.value_type is not None
            and self.nullable is not None
            and self.index_types is not None
        )
