from collections.abc import Iterable


class CmpCounter:
    """Counts the comparisons a sorting function performs on wrapped values"""

    def __init__(self) -> None:
        self.count = 0

    def wrap(self, values: Iterable) -> list:
        counter = self

        # fmt: off
        class K(object):
            __slots__ = ['obj']
            def __init__(self, obj):
                self.obj = obj
            def __lt__(self, other):
                counter.count += 1
                return self.obj < other.obj
            def __gt__(self, other):
                counter.count += 1
                return self.obj > other.obj
            def __le__(self, other):
                counter.count += 1
                return self.obj <= other.obj
            def __ge__(self, other):
                counter.count += 1
                return self.obj >= other.obj
            def __eq__(self, other):
                return self.obj == other.obj
            def __repr__(self):
                return repr(self.obj)
            __hash__ = None
        # fmt: on

        return [K(x) for x in values]

    @staticmethod
    def unwrap(wrapped: Iterable) -> list:
        return [x.obj for x in wrapped]

    def reset(self) -> None:
        self.count = 0
