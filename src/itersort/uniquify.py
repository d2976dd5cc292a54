## uniquify - itersort
"""Duplicate removal by sorting position handles

## Overview

The functions in this module remove duplicate elements from a sequence
without hashing the elements and without sorting the elements themselves.
A list of integer handles into the sequence is sorted by the pointed-to
elements, adjacent equivalent handles are dropped, and the surviving
handles are sorted back to position order. The sequence can then be
compacted in place with one exchange per unique element.

For inputs with few duplicates, this generally uses less memory than
tracking elements in a set. Sorting only integers also keeps every
element in place until the final compaction.

- `stable_unique_handles()`, `unstable_unique_handles()`: handles of the
  first occurrence of each equivalence class, in ascending position order
- `stable_uniquify_range()`: moves the first occurrences to a prefix
  of the range, returning the end of the prefix
- `stable_uniquify()`: removes duplicates from a sequence, in place

## Relations

Each function accepts an ordering relation `compare` and an equality
relation `equal`, defaulting to `<` and `==`. See `itersort.relations`
"""

import heapq

from .common.exception import SwapError
from .common.loglib import LogLevel, default_level, get_logger
from .common.naming import export
from .relations import Compare, EqualPred, natural_equal, natural_less
from .sequence import Swap, SwappableSequence, check_range, shrink, swap_items

import logging
from typing import List, Optional, Sequence


_logger: Optional[logging.Logger] = None


def logger() -> logging.Logger:
    """return the module logger, configuring it on first call

    The logger level is `TRACE` if the environment variable
    `ITERSORT_LOG_VERBOSE` is set at the time of the first call,
    else `WARNING`
    """
    global _logger
    if _logger is None:
        _logger = get_logger(__name__, level=default_level(),
                             handler_class="logging.StreamHandler")
    return _logger


class HandleOrder:
    """sort key for a handle, ordered by the element it denotes

    Only `<` is defined, which is all that `list.sort()` and `heapq`
    require. Each comparison calls `compare` once.
    """

    __slots__ = ("handle", "seq", "compare")

    def __init__(self, handle: int, seq: SwappableSequence, compare: Compare):
        self.handle = handle
        self.seq = seq
        self.compare = compare

    def __lt__(self, other: "HandleOrder") -> bool:
        seq = self.seq
        return bool(self.compare(seq[self.handle], seq[other.handle]))

    def __repr__(self):
        return "<%s %d>" % (self.__class__.__name__, self.handle)


def _collapse(seq: SwappableSequence, ordered: Sequence[int],
              equal: EqualPred) -> List[int]:
    ## keep the smallest handle of each run of handles whose elements are
    ## equal to the element of the first handle in the run, then restore
    ## position order
    uniq = []
    anchor = None
    for h in ordered:
        if anchor is not None and equal(seq[anchor], seq[h]):
            if h < uniq[-1]:
                uniq[-1] = h
        else:
            anchor = h
            uniq.append(h)
    uniq.sort()
    return uniq


def heap_order(seq: SwappableSequence, begin: int, end: int,
               compare: Compare = natural_less) -> List[int]:
    """return the handles `[begin, end)` ordered by their elements, with a heap sort

    The sort is not stable. `begin` and `end` are not validated.
    """
    heap = [HandleOrder(h, seq, compare) for h in range(begin, end)]
    heapq.heapify(heap)
    return [heapq.heappop(heap).handle for _ in range(len(heap))]


def stable_unique_handles(
    # fmt: off
    seq: SwappableSequence,
    begin: int = 0,
    end: Optional[int] = None,
    compare: Compare = natural_less,
    equal: EqualPred = natural_equal
    # fmt: on
) -> List[int]:
    """return handles to the first occurrence of each element in a range

    ## Usage

    `seq`
    : a random-access sequence. Elements are only read.

    `begin`, `end`
    : the half-open range of positions to process, by default the whole
      sequence

    `compare`, `equal`
    : ordering and equality relations for the elements

    Returns a list of integer positions in ascending order. The list holds
    one position for each equivalence class under `equal`, being the
    position of the earliest element of that class within the range.

    ## Implementation Notes

    - The handles are sorted with `list.sort()`, which is stable. Among
      elements equivalent under `compare`, the earliest remains first
      after sorting and is the one retained.

    - Complexity is that of a comparison sort of `end - begin` integers,
      with O(N) additional memory for the handles

    ## Exceptions

    - raises `RangeError` for an invalid `begin`, `end`
    - any exception raised by `compare` or `equal` is propagated
    """
    begin, end = check_range(seq, begin, end)
    handles = list(range(begin, end))
    handles.sort(key=lambda h: HandleOrder(h, seq, compare))
    uniq = _collapse(seq, handles, equal)
    logger().log(LogLevel.TRACE, "stable_unique_handles [%d, %d) => %d unique",
                 begin, end, len(uniq))
    return uniq


def unstable_unique_handles(
    # fmt: off
    seq: SwappableSequence,
    begin: int = 0,
    end: Optional[int] = None,
    compare: Compare = natural_less,
    equal: EqualPred = natural_equal
    # fmt: on
) -> List[int]:
    """return handles to one occurrence of each element in a range

    As `stable_unique_handles()`, except that the handles are ordered with a
    heap sort, which is not stable. The result is in ascending position order
    and has one handle per equivalence class under `equal`.

    Within each run of equal elements after sorting, the smallest handle is
    retained. When `equal` holds exactly for the elements that `compare`
    does not distinguish, that is the first occurrence. For a looser
    `equal`, a run may not hold the whole class and the retained handle
    may be that of a later element.
    """
    begin, end = check_range(seq, begin, end)
    uniq = _collapse(seq, heap_order(seq, begin, end, compare), equal)
    logger().log(LogLevel.TRACE, "unstable_unique_handles [%d, %d) => %d unique",
                 begin, end, len(uniq))
    return uniq


def stable_uniquify_range(
    # fmt: off
    seq: SwappableSequence,
    begin: int = 0,
    end: Optional[int] = None,
    compare: Compare = natural_less,
    equal: EqualPred = natural_equal,
    swap: Swap = swap_items,
    handles: Optional[Sequence[int]] = None
    # fmt: on
) -> int:
    """partition a range into unique elements and duplicates, in place

    Returns a position `boundary` such that `[begin, boundary)` holds the
    first occurrence of each element of the range, in original order, and
    `[boundary, end)` holds the remaining elements in an unspecified order.

    ## Usage

    `handles`
    : if provided, the ascending first-occurrence positions within the
      range, e.g as returned by `stable_unique_handles()`. Otherwise the
      handles are computed with `stable_unique_handles()`, using
      `compare` and `equal`. Handles outside of the range or out of order
      are not detected. They result in an incorrect partition.

    `swap`
    : a function `swap(seq, i, j)` exchanging two elements of `seq`.
      This is called exactly once for each unique element, including
      those already in place, for which `i == j`.

    ## Exceptions

    If `swap` raises an exception, a `SwapError` is raised from that
    exception. No exchanges are reverted. Assuming that `swap` does not
    remove elements, each position in the range will still hold an element
    of the range, though not necessarily in a partitioned order.
    """
    begin, end = check_range(seq, begin, end)
    uniq = stable_unique_handles(seq, begin, end, compare, equal) if handles is None else handles
    nuniq = len(uniq)
    boundary = begin
    j = 0
    it = begin
    while it < end and j != nuniq:
        if it == uniq[j]:
            try:
                swap(seq, it, boundary)
            except Exception as exc:
                logger().debug("swap failed at %d => %d: %s", it, boundary, exc)
                raise SwapError("Failed to exchange elements", position=it,
                                boundary=boundary) from exc
            j = j + 1
            boundary = boundary + 1
        it = it + 1
    logger().log(LogLevel.TRACE, "stable_uniquify_range [%d, %d) => %d", begin, end, boundary)
    return boundary


def stable_uniquify(
    # fmt: off
    seq: SwappableSequence,
    compare: Compare = natural_less,
    equal: EqualPred = natural_equal,
    swap: Swap = swap_items
    # fmt: on
) -> SwappableSequence:
    """remove duplicate elements from a sequence, in place

    Retains the first occurrence of each element under `equal`, preserving
    the original order. The sequence is then truncated to the number of
    unique elements and returned.

    Handles into `seq` from before the call are no longer valid after the
    call. The sequence must support slice deletion or `pop()`.

    ## Exceptions

    - raises `SwapError` as for `stable_uniquify_range()`. In that case,
      the sequence is not truncated.
    """
    boundary = stable_uniquify_range(seq, 0, len(seq), compare, equal, swap)
    shrink(seq, boundary)
    return seq


# autopep8: off
# fmt: off
__all__ = []
export(__name__, __all__, HandleOrder, heap_order, stable_unique_handles, unstable_unique_handles,
       stable_uniquify_range, stable_uniquify)
