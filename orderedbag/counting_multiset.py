from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, MutableMapping
from typing import Generic

from orderedbag.configurations import Configurations
from orderedbag.errors import NotFoundError
from orderedbag.ordered_map import KeyType, OrderedMap, OrderedMapView, natural_compare

logger = logging.getLogger(__name__)


class CountingMultiset(Generic[KeyType]):
    def __init__(
        self,
        elements: Iterable[KeyType] | None = None,
        compare: Callable[[KeyType, KeyType], int] = natural_compare,
        configurations: Configurations | None = None,
    ) -> None:
        self.counts: OrderedMap[KeyType, int] = OrderedMap(compare=compare, configurations=configurations)
        for element in elements or []:
            self.add(element)

    def add(self, element: KeyType) -> None:
        self.counts.put(element, self.counts.get(element, 0) + 1)

    def count(self, element: KeyType) -> int:
        count = self.counts.get(element)
        if count is None:
            raise NotFoundError(element)
        return count

    def remove(self, element: KeyType) -> int:
        count = self.counts.remove(element)
        if count is None:
            raise NotFoundError(element)
        return count

    def size(self) -> int:
        return self.counts.size()

    def add_all(self, source: CountingMultiset[KeyType]) -> None:
        for element, count in source.counts.items():
            self.counts.put(element, self.counts.get(element, 0) + count)
        logger.debug("merged %d distinct elements, multiset now holds %d", source.size(), self.size())

    def to_mapping(self) -> OrderedMapView[KeyType, int]:
        return OrderedMapView(self.counts)

    def copy_into(self, destination: OrderedMap[KeyType, int] | MutableMapping[KeyType, int]) -> None:
        self.counts.copy_into(destination)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[KeyType]:
        return iter(self.counts)

    def __contains__(self, element: KeyType) -> bool:
        return self.counts.contains_key(element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountingMultiset):
            return NotImplemented
        return self.counts == other.counts

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.counts!r})"
