from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Generic, Protocol, TypeVar, overload

from orderedbag.configurations import Configurations
from orderedbag.errors import InvariantViolation

logger = logging.getLogger(__name__)


class Orderable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...  # noqa: ANN401


KeyType = TypeVar("KeyType", bound=Orderable)
ValueType = TypeVar("ValueType")
DefaultType = TypeVar("DefaultType")


def natural_compare(one: Orderable, other: Orderable) -> int:
    if one < other:
        return -1
    if other < one:
        return 1
    return 0


class OrderedMap(Generic[KeyType, ValueType]):
    """
    Mapping kept in ascending key order inside two index-aligned lists.

    Keys are matched with ``compare(key, existing) == 0``, never by identity, so two distinct
    objects standing for the same logical key share one entry. Every operation is a linear scan.
    """

    def __init__(
        self,
        pairs: OrderedMap[KeyType, ValueType]
        | Mapping[KeyType, ValueType]
        | Iterable[tuple[KeyType, ValueType]]
        | None = None,
        compare: Callable[[KeyType, KeyType], int] = natural_compare,
        configurations: Configurations | None = None,
    ) -> None:
        self.compare = compare
        self.configurations = configurations or Configurations()
        self._keys: list[KeyType] = []
        self._values: list[ValueType] = []
        if pairs is not None:
            self.put_all(pairs)

    def _index_of(self, key: KeyType) -> int | None:
        for index, existing in enumerate(self._keys):
            result = self.compare(key, existing)
            if result == 0:
                return index
            if result < 0:
                return None
        return None

    def _check_aligned(self) -> None:
        if len(self._keys) != len(self._values):
            raise InvariantViolation(
                f"keys and values out of sync ({len(self._keys)} keys, {len(self._values)} values)"
            )

    def _verify(self) -> None:
        if not self.configurations.verify_invariants:
            return
        self._check_aligned()
        for index in range(1, len(self._keys)):
            if self.compare(self._keys[index - 1], self._keys[index]) >= 0:
                raise InvariantViolation(f"keys not strictly ascending at index {index}")

    def size(self) -> int:
        return len(self._keys)

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_key(self, key: KeyType) -> bool:
        return self._index_of(key) is not None

    def contains_value(self, value: ValueType) -> bool:
        return value in self._values

    @overload
    def get(self, key: KeyType) -> ValueType | None: ...

    @overload
    def get(self, key: KeyType, default: DefaultType) -> ValueType | DefaultType: ...

    def get(self, key: KeyType, default: Any = None) -> Any:  # noqa: ANN401
        index = self._index_of(key)
        if index is None:
            return default
        return self._values[index]

    def put(self, key: KeyType, value: ValueType) -> ValueType | None:
        for index, existing in enumerate(self._keys):
            result = self.compare(key, existing)

            if result == 0:
                old_value = self._values[index]
                self._values[index] = value
                self._verify()
                return old_value

            if result < 0:
                self._keys.insert(index, key)
                self._values.insert(index, value)
                self._verify()
                return None

        self._keys.append(key)
        self._values.append(value)
        self._verify()
        return None

    def put_all(
        self,
        source: OrderedMap[KeyType, ValueType] | Mapping[KeyType, ValueType] | Iterable[tuple[KeyType, ValueType]],
    ) -> None:
        pairs: Iterable[tuple[KeyType, ValueType]]
        if isinstance(source, OrderedMap | Mapping):
            pairs = source.items()
        else:
            pairs = source

        count = 0
        for key, value in pairs:
            self.put(key, value)
            count += 1
        logger.debug("merged %d pairs, map now holds %d keys", count, self.size())

    def _delete_at(self, index: int) -> ValueType:
        old_value = self._values[index]
        del self._keys[index]
        del self._values[index]
        self._verify()
        return old_value

    def remove(self, key: KeyType) -> ValueType | None:
        index = self._index_of(key)
        if index is None:
            return None
        return self._delete_at(index)

    def clear(self) -> None:
        logger.debug("clearing %d keys", self.size())
        self._keys.clear()
        self._values.clear()

    def keys(self) -> tuple[KeyType, ...]:
        self._check_aligned()
        return tuple(self._keys)

    def values(self) -> tuple[ValueType, ...]:
        self._check_aligned()
        return tuple(self._values)

    def items(self) -> tuple[tuple[KeyType, ValueType], ...]:
        self._check_aligned()
        return tuple(zip(self._keys, self._values, strict=True))

    def copy(self) -> OrderedMap[KeyType, ValueType]:
        new_map: OrderedMap[KeyType, ValueType] = OrderedMap(compare=self.compare, configurations=self.configurations)
        new_map._keys = list(self.keys())
        new_map._values = list(self._values)
        return new_map

    def copy_into(self, destination: OrderedMap[KeyType, ValueType] | MutableMapping[KeyType, ValueType]) -> None:
        for key, value in self.items():
            destination[key] = value

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[KeyType]:
        return iter(self.keys())

    def __contains__(self, key: KeyType) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: KeyType) -> ValueType:
        index = self._index_of(key)
        if index is None:
            raise KeyError(key)
        return self._values[index]

    def __setitem__(self, key: KeyType, value: ValueType) -> None:
        self.put(key, value)

    def __delitem__(self, key: KeyType) -> None:
        index = self._index_of(key)
        if index is None:
            raise KeyError(key)
        self._delete_at(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        # maps ordered differently can't be compared pairwise
        if self.compare is not other.compare or len(self) != len(other):
            return False
        try:
            for (key, value), (other_key, other_value) in zip(self.items(), other.items(), strict=True):
                if self.compare(key, other_key) != 0 or value != other_value:
                    return False
        except TypeError:
            return False
        return True

    def __repr__(self) -> str:
        limit = self.configurations.repr_max_entries
        pairs = [f"{key!r}: {value!r}" for key, value in self.items()[:limit]]
        if len(self) > limit:
            pairs.append("...")
        return f"{type(self).__name__}({{{', '.join(pairs)}}})"


class OrderedMapView(Mapping[KeyType, ValueType]):
    """Read-only snapshot of an ordered map; later changes to the source are not seen."""

    def __init__(self, source: OrderedMap[KeyType, ValueType]) -> None:
        self._map = source.copy()

    def __getitem__(self, key: KeyType) -> ValueType:
        try:
            return self._map[key]
        except TypeError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[KeyType]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        try:
            return self._map.contains_key(key)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedMapView):
            return self._map == other._map
        if isinstance(other, OrderedMap):
            return self._map == other
        if isinstance(other, Mapping):
            return len(self) == len(other) and all(key in other and other[key] == value for key, value in self.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map!r})"
