import logging
from collections.abc import Iterable, MutableSequence
from time import perf_counter
from typing import Any, Optional, TextIO

from .Config import *
from .SortingMachine import SortingMachine
from .vector_generator import generate_random_vector

logger = logging.getLogger(__name__)


def print_vector(data: Iterable, file: Optional[TextIO] = None) -> None:
    print("".join(f"{x} " for x in data), file=file)


def timed_sort(sorter: SortingMachine, data: MutableSequence) -> float:
    "Sort `data` in place and return the elapsed wall-clock time in milliseconds"
    start_time = perf_counter()
    sorter.sort(data)
    return (perf_counter() - start_time) * 1000


def full_sorting_demo(
    sort_type: Any,
    length: int,
    max_number: float,
    description: str,
    dtype: Any = int,
    timed: bool = True,
    seed: Optional[int] = None,
) -> Optional[list]:
    print(f"--- {description} ---")

    print(f"Generating vector with length {length} and max value {max_number}...")
    data = generate_random_vector(length, max_number, dtype, seed=seed)
    if length > 0 and not data:
        logger.error("Failed to generate data.")
        return None
    if length == 0:
        print("Generated empty vector.")

    print("Original vector: ", end="")
    print_vector(data)

    sorter = SortingMachine(sort_type)
    duration_ms = timed_sort(sorter, data)

    if sorter.algorithm is not None and not sorter.algorithm.validator(data):
        logger.error(f"{sorter.method_name} produced an unsorted vector.")

    print("Sorted vector: ", end="")
    print_vector(data)
    print(f"Sort count for this demonstration: {sorter.get_sort_count()}")
    if timed:
        print(f"Sorting took: {int(duration_ms)} milliseconds.")
    print()
    return data


def run_demos(demos: Iterable[DemoCase] = DEMOS, timed: bool = True, seed: Optional[int] = None) -> None:
    for i, demo in enumerate(demos):
        if i:
            print(DEMO_SEPARATOR)
        full_sorting_demo(demo.sort_type, demo.length, demo.max_number, demo.description, demo.dtype, timed, seed)
