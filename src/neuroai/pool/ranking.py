"""
NeuroAI Ranking Module

This module implements the PriorityRanking class, a min-priority selection structure.

Classes:
    PriorityRanking: Collection returning its items in order of increasing priority value
"""

import heapq
from itertools import count
from typing    import Any, Generic, TypeVar

from neuroai.errors import EmptyCollectionError

T = TypeVar('T')

class PriorityRanking(Generic[T]):
    """
    A collection that always hands out the item with the lowest priority value first.

    To extract items by decreasing score, push each one with priority
    'max_score - score'. Items with equal priority come out in the order
    they were pushed.

    Public Methods:
        push(item, priority): Insert an item
        pop():                Remove and return the item with the lowest priority value
        pop_node():           Same as pop(), but also return the priority
        is_empty():           Whether the collection holds no items
    """

    def __init__(self):
        self._heap   : list[tuple[float, int, Any]] = []
        self._counter                               = count(0)   # insertion order, breaks ties

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> T:
        """
        Remove and return the item with the lowest priority value.

        Raises:
            EmptyCollectionError: if the collection is empty
        """
        item, _ = self.pop_node()
        return item

    def pop_node(self) -> tuple[T, float]:
        """
        Remove the item with the lowest priority value and return it with its priority.

        Raises:
            EmptyCollectionError: if the collection is empty
        """
        if not self._heap:
            raise EmptyCollectionError("Cannot pop from an empty PriorityRanking")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self):
        return len(self._heap)
