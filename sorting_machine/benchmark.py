import logging
from collections.abc import Iterable
from itertools import product
from typing import Any, Optional

import pandas as pd
from tqdm import tqdm

from .cmp_counter import CmpCounter
from .Config import *
from .demo import timed_sort
from .sorting_algorithms.sorting_algorithms import SortType, sorting_algorithms
from .SortingMachine import SortingMachine
from .vector_generator import generate_random_vector

logger = logging.getLogger(__name__)

COLUMNS = ["name", "N", "ms", "comparisons", "sort_count"]


def benchmark(
    lengths: Iterable[int] = BENCHMARK_LENGTHS,
    max_number: float = BENCHMARK_MAX_NUMBER,
    dtype: Any = int,
    repeats: int = 1,
    seed: Optional[int] = None,
    progress: bool = True,
) -> pd.DataFrame:
    """
    Time every sort type on the same random vectors.

    Each (length, repeat) pair generates one vector which every strategy sorts a copy of,
    so the rows of one pair are directly comparable. One SortingMachine per strategy is
    reused across the whole run, its sort_count column grows row by row.
    """
    tasks = list(product(lengths, range(repeats)))
    machines = {sort_type: SortingMachine(sort_type) for sort_type in SortType}
    counter = CmpCounter()
    rows = []
    for N, repeat in tqdm(tasks, disable=not progress):
        data = generate_random_vector(N, max_number, dtype, seed=None if seed is None else seed + repeat)
        if N != 0 and not data:
            logger.error(f"Failed to generate data of length {N}, skipping it.")
            continue
        for sort_type, machine in machines.items():
            counter.reset()
            wrapped = counter.wrap(data)
            ms = timed_sort(machine, wrapped)
            result = counter.unwrap(wrapped)
            if not sorting_algorithms[sort_type].validator(result):
                logger.error(f"{machine.method_name} produced an unsorted vector of length {N}.")
            rows.append((machine.method_name, N, ms, counter.count, machine.get_sort_count()))
    return pd.DataFrame(rows, columns=COLUMNS)


def format_benchmark(df: pd.DataFrame) -> str:
    if df.empty:
        return "No benchmark results."
    table = df.pivot_table(index="N", columns="name", values=["ms", "comparisons"], aggfunc="mean")
    return table.to_string(float_format=lambda x: f"{x:.2f}")
