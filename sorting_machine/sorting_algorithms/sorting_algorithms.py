from enum import IntEnum

from .impl import bubble_sort, insertion_sort
from .SortingAlgorithm import SortingAlgorithm


class SortType(IntEnum):
    BUBBLE_SORT = 1
    INSERTION_SORT = 2
    DEFAULT_SORT = BUBBLE_SORT


sorting_algorithms: dict[SortType, SortingAlgorithm] = {
    SortType.BUBBLE_SORT: bubble_sort.algorithm,
    SortType.INSERTION_SORT: insertion_sort.algorithm,
}
