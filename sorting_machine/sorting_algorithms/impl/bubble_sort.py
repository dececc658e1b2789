from ..SortingAlgorithm import SortingAlgorithm


def bubble_sort(arr: list) -> None:
    n = len(arr)
    if n < 2:
        return
    for i in range(n - 1):
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


algorithm = SortingAlgorithm("Bubble Sort", bubble_sort)
