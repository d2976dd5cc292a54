## relations - itersort
"""Ordering and equality relations over sequence elements

An ordering relation (`Compare`) is a callable `compare(a, b)` returning a
true value when `a` is strictly ordered before `b`. It should define a strict
weak ordering.

An equality relation (`EqualPred`) is a callable `equal(a, b)` returning a
true value when `a` and `b` are equivalent. For a correct deduplication, any
two elements where neither `compare(a, b)` nor `compare(b, a)` holds should
be `equal`. This is not checked.
"""

import operator

from .common.naming import export

from typing import Any, Callable, Tuple
from typing_extensions import TypeAlias, TypeVar


T = TypeVar("T")
K = TypeVar("K")

Compare: TypeAlias = Callable[[T, T], Any]
EqualPred: TypeAlias = Callable[[T, T], Any]


natural_less: Compare = operator.lt
natural_equal: EqualPred = operator.eq


def less_by(key: Callable[[T], K]) -> Compare:
    """return an ordering relation comparing `key(a) < key(b)`"""
    def compare(a: T, b: T) -> bool:
        return key(a) < key(b)
    compare.__qualname__ = "less_by.<%s>" % getattr(key, "__name__", repr(key))
    return compare


def equal_by(key: Callable[[T], K]) -> EqualPred:
    """return an equality relation comparing `key(a) == key(b)`"""
    def equal(a: T, b: T) -> bool:
        return key(a) == key(b)
    equal.__qualname__ = "equal_by.<%s>" % getattr(key, "__name__", repr(key))
    return equal


def key_relations(key: Callable[[T], K]) -> Tuple[Compare, EqualPred]:
    """return the pair `(less_by(key), equal_by(key))`

    ## Usage

    Compare only a projected part of each element, e.g the position of a
    point stored as `(position, color)`:

    ```python
    from operator import itemgetter
    from itersort import key_relations, stable_unique_handles

    by_position, same_position = key_relations(itemgetter(0))
    handles = stable_unique_handles(points, compare=by_position, equal=same_position)
    ```
    """
    return (less_by(key), equal_by(key),)


def equivalence_of(compare: Compare) -> EqualPred:
    """return the equivalence relation induced by the ordering `compare`

    Two elements are equivalent when neither is ordered before the other.
    The result is always consistent with `compare`, at the cost of two
    calls to `compare` per test.
    """
    def equal(a: T, b: T) -> bool:
        return not compare(a, b) and not compare(b, a)
    return equal


# autopep8: off
# fmt: off
__all__ = ["Compare", "EqualPred", "natural_less", "natural_equal"]
export(__name__, less_by, equal_by, key_relations, equivalence_of)
