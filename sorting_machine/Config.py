from typing import NamedTuple

from .sorting_algorithms.sorting_algorithms import SortType


class DemoCase(NamedTuple):
    sort_type: SortType
    dtype: type | str
    length: int
    max_number: float
    description: str


DEFAULT_SORT = SortType.DEFAULT_SORT

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "WARNING"

DEMO_SEPARATOR = "--------------------"
DEMOS = (
    DemoCase(SortType.BUBBLE_SORT, int, 10000, 10000, "Bubble Sort (int, 10000 elements, max 10000)"),
    DemoCase(SortType.INSERTION_SORT, int, 10000, 10000, "Insertion Sort (int, 10000 elements, max 10000)"),
    DemoCase(SortType.INSERTION_SORT, float, 5000, 1000.5, "Insertion Sort (double, 5000 elements, max 1000.5)"),
    DemoCase(SortType.BUBBLE_SORT, "float32", 50, 100.0, "Bubble Sort (float, 50 elements, max 100)"),
    DemoCase(SortType.BUBBLE_SORT, int, 0, 100, "Bubble Sort (int, 0 elements)"),
)

BENCHMARK_LENGTHS = (10, 100, 500, 1000, 2000)
BENCHMARK_MAX_NUMBER = 10000
