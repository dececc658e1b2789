import logging
from collections.abc import MutableSequence
from numbers import Integral
from typing import Any, Optional

from .Config import *
from .sorting_algorithms.sorting_algorithms import SortType, sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

logger = logging.getLogger(__name__)


def to_sort_type(value: Any) -> Optional[SortType]:
    """Resolve a SortType member, its integer value or its name, or None if unrecognized"""
    if isinstance(value, SortType):
        return value
    if isinstance(value, str):
        return SortType.__members__.get(value.strip().upper())
    if isinstance(value, Integral) and not isinstance(value, bool):
        try:
            return SortType(int(value))
        except ValueError:
            return None
    return None


class SortingMachine:
    """
    In-place sorter with a selectable strategy and a count of completed sorts.

    The count starts at 0, grows by exactly one per completed call to sort()
    and is only reset by constructing a new machine.
    """

    def __init__(self, sort_type: Any = DEFAULT_SORT) -> None:
        self._sort_count = 0
        self._sort_type: Optional[SortType] = None
        self._algorithm: Optional[SortingAlgorithm] = None
        self.set_sorting_type(sort_type)

    def set_sorting_type(self, sort_type: Any) -> None:
        resolved = to_sort_type(sort_type)
        if resolved is None:
            logger.warning(f"Unknown sorting type ({sort_type!r}). Defaulting to Bubble Sort.")
            resolved = SortType.BUBBLE_SORT
        self._sort_type = resolved
        self._algorithm = sorting_algorithms[resolved]

    def sort(self, data: MutableSequence) -> None:
        if self._algorithm is None:
            logger.error("No sorting method is selected!")
            return
        logger.debug(f"Sorting {len(data)} elements using {self.method_name}")
        self._algorithm.func(data)
        self._sort_count += 1

    def get_sort_count(self) -> int:
        return self._sort_count

    @property
    def sort_count(self) -> int:
        return self._sort_count

    @property
    def sort_type(self) -> Optional[SortType]:
        return self._sort_type if self._algorithm is not None else None

    @property
    def algorithm(self) -> Optional[SortingAlgorithm]:
        return self._algorithm

    @property
    def method_name(self) -> str:
        return "Unknown Sort Method" if self._algorithm is None else self._algorithm.name

    def __repr__(self) -> str:
        return f"SortingMachine({self.method_name!r}, sort_count={self._sort_count})"
