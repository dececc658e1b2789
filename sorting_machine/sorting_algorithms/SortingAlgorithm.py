from collections.abc import Callable, Sequence
from itertools import pairwise
from typing import NamedTuple


def _is_non_descending(arr: Sequence) -> bool:
    return all(not (x > y) for x, y in pairwise(arr))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[list], None]
    stable: bool = True
    validator: Callable[[Sequence], bool] = _is_non_descending
