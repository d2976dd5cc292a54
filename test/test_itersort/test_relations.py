## tests for itersort.relations

from assertpy import assert_that
from operator import itemgetter
from pytest import mark

import itersort.relations as subject


def test_natural_relations():
    assert_that(subject.natural_less(1, 2)).is_true()
    assert_that(subject.natural_less(2, 2)).is_false()
    assert_that(subject.natural_equal((1, "a"), (1, "a"))).is_true()
    assert_that(subject.natural_equal((1, "a"), (1, "b"))).is_false()


@mark.dependency()
def test_less_by():
    less = subject.less_by(itemgetter(0))
    assert_that(less((1, "z"), (2, "a"))).is_true()
    assert_that(less((2, "a"), (1, "z"))).is_false()
    ## only the projected field is compared
    assert_that(less((1, "a"), (1, "z"))).is_false()


@mark.dependency()
def test_equal_by():
    equal = subject.equal_by(len)
    assert_that(equal("abc", "xyz")).is_true()
    assert_that(equal("abc", "xy")).is_false()


@mark.dependency(depends=["test_less_by", "test_equal_by"])
def test_key_relations():
    less, equal = subject.key_relations(abs)
    assert_that(less(-1, 2)).is_true()
    assert_that(less(-3, 2)).is_false()
    assert_that(equal(-2, 2)).is_true()


def test_equivalence_of():
    equal = subject.equivalence_of(lambda a, b: a // 10 < b // 10)
    assert_that(equal(11, 19)).is_true()
    assert_that(equal(11, 21)).is_false()
    assert_that(equal(21, 11)).is_false()
