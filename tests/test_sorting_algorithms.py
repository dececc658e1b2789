import unittest
from random import Random

from sorting_machine.cmp_counter import CmpCounter
from sorting_machine.sorting_algorithms.impl.bubble_sort import bubble_sort
from sorting_machine.sorting_algorithms.impl.insertion_sort import insertion_sort
from sorting_machine.sorting_algorithms.sorting_algorithms import SortType, sorting_algorithms


class Keyed:
    """Orders by key only so equal keys can be told apart by tag"""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __gt__(self, other):
        return self.key > other.key


class TestSortingAlgorithms(unittest.TestCase):
    def test_table_is_closed(self):
        self.assertEqual(set(sorting_algorithms), {SortType.BUBBLE_SORT, SortType.INSERTION_SORT})
        self.assertIs(SortType.DEFAULT_SORT, SortType.BUBBLE_SORT)
        self.assertEqual(len(list(SortType)), 2)

    def test_random_sequences_become_sorted_permutations(self):
        r = Random(1234)
        for algorithm in sorting_algorithms.values():
            for n in (0, 1, 2, 3, 7, 50):
                data = [r.randint(-20, 20) for _ in range(n)]
                expected = sorted(data)
                algorithm.func(data)
                self.assertEqual(data, expected, algorithm.name)
                self.assertTrue(algorithm.validator(data))

    def test_floats_and_strings(self):
        for algorithm in sorting_algorithms.values():
            floats = [3.5, -1.25, 0.0, 2.0, -1.25]
            algorithm.func(floats)
            self.assertEqual(floats, [-1.25, -1.25, 0.0, 2.0, 3.5])
            words = ["pear", "apple", "fig"]
            algorithm.func(words)
            self.assertEqual(words, ["apple", "fig", "pear"])

    def test_stable_on_equal_keys(self):
        for algorithm in sorting_algorithms.values():
            data = [Keyed(2, "a"), Keyed(1, "b"), Keyed(2, "c"), Keyed(1, "d"), Keyed(0, "e")]
            algorithm.func(data)
            self.assertEqual([x.tag for x in data], ["e", "b", "d", "a", "c"], algorithm.name)
            self.assertTrue(algorithm.stable)

    def test_validator_rejects_unsorted(self):
        validator = sorting_algorithms[SortType.BUBBLE_SORT].validator
        self.assertFalse(validator([2, 1]))
        self.assertTrue(validator([1, 1, 2]))
        self.assertTrue(validator([]))

    def test_comparison_pattern_on_sorted_input(self):
        counter = CmpCounter()
        n = 10
        wrapped = counter.wrap(range(n))
        bubble_sort(wrapped)
        self.assertEqual(counter.count, n * (n - 1) // 2)
        self.assertEqual(counter.unwrap(wrapped), list(range(n)))

        counter.reset()
        wrapped = counter.wrap(range(n))
        insertion_sort(wrapped)
        self.assertEqual(counter.count, n - 1)

    def test_bubble_sort_short_inputs_do_not_compare(self):
        counter = CmpCounter()
        for n in (0, 1):
            wrapped = counter.wrap(range(n))
            bubble_sort(wrapped)
        self.assertEqual(counter.count, 0)


if __name__ == "__main__":
    unittest.main()
