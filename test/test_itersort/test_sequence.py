## tests for itersort.sequence

from assertpy import assert_that
from collections import UserList, deque
from pytest import mark

import itersort.sequence as subject
from itersort.common.exception import RangeError


class PopOnly(UserList):
    """list wrapper not supporting slice deletion"""

    def __delitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("slice deletion not supported", index)
        super().__delitem__(index)


def test_protocol():
    assert_that(isinstance([], subject.SwappableSequence)).is_true()
    assert_that(isinstance(deque(), subject.SwappableSequence)).is_true()
    assert_that(isinstance((), subject.SwappableSequence)).is_false()


def test_swap_items():
    data = ["a", "b", "c"]
    subject.swap_items(data, 0, 2)
    assert_that(data).is_equal_to(["c", "b", "a"])


def test_swap_items_same_position():
    class NoWrite(list):
        def __setitem__(self, index, value):
            raise AssertionError("unexpected write", index)

    data = NoWrite([1, 2])
    subject.swap_items(data, 1, 1)
    assert_that(list(data)).is_equal_to([1, 2])


@mark.dependency()
def test_shrink_list():
    data = [1, 2, 3, 4]
    subject.shrink(data, 2)
    assert_that(data).is_equal_to([1, 2])
    subject.shrink(data, 2)
    assert_that(data).is_equal_to([1, 2])
    subject.shrink(data, 0)
    assert_that(data).is_empty()


@mark.dependency(depends=["test_shrink_list"])
def test_shrink_pop():
    data = PopOnly([1, 2, 3, 4])
    subject.shrink(data, 1)
    assert_that(list(data)).is_equal_to([1])


@mark.dependency(depends=["test_shrink_list"])
def test_shrink_user_list():
    ## slice deletion, without a pop() per element
    class CountPop(UserList):
        pops = 0

        def pop(self, i=-1):
            self.pops = self.pops + 1
            return super().pop(i)

    data = CountPop([1, 2, 3, 4, 5])
    subject.shrink(data, 2)
    assert_that(list(data)).is_equal_to([1, 2])
    assert_that(data.pops).is_equal_to(0)


@mark.dependency(depends=["test_shrink_pop"])
def test_shrink_deque():
    data = deque([1, 2, 3, 4])
    subject.shrink(data, 3)
    assert_that(list(data)).is_equal_to([1, 2, 3])
    subject.shrink(data, 0)
    assert_that(data).is_empty()


def test_check_range():
    data = [0] * 4
    assert_that(subject.check_range(data)).is_equal_to((0, 4))
    assert_that(subject.check_range(data, 1, 3)).is_equal_to((1, 3))
    assert_that(subject.check_range(data, 4, 4)).is_equal_to((4, 4))
    assert_that(subject.check_range([])).is_equal_to((0, 0))


def test_check_range_invalid():
    data = [0] * 4
    for begin, end in ((-1, 2), (3, 2), (0, 5), (5, None)):
        assert_that(subject.check_range).raises(RangeError).when_called_with(data, begin, end)
    assert_that(subject.check_range).raises(IndexError).when_called_with(data, 2, 1)
