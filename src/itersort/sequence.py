## sequence - itersort
"""The random-access sequence abstraction used by `itersort.uniquify`

Positions within a sequence are denoted by integer handles. A handle
remains valid across element exchange, and is invalidated by any change
in the size of the sequence.
"""

from .common.exception import RangeError
from .common.naming import export

from typing import Callable, Optional, Protocol, Tuple, runtime_checkable
from typing_extensions import TypeAlias, TypeVar


T = TypeVar("T")


@runtime_checkable
class SwappableSequence(Protocol[T]):
    """protocol for a sized, indexable sequence supporting item assignment

    Any `list` or `collections.abc.MutableSequence` satisfies this protocol.
    For `shrink()`, the sequence must also support slice deletion or `pop()`.
    """

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> T:
        ...

    def __setitem__(self, index: int, value: T):
        ...


Swap: TypeAlias = Callable[[SwappableSequence, int, int], None]


def swap_items(seq: SwappableSequence, i: int, j: int) -> None:
    """exchange the elements at positions `i` and `j` of `seq`

    No element is read or written when `i == j`
    """
    if i != j:
        seq[i], seq[j] = seq[j], seq[i]


def shrink(seq: SwappableSequence, size: int) -> None:
    """remove every element of `seq` at a position not less than `size`

    The tail is removed with `del seq[size:]`. For a sequence raising
    `TypeError` on slice deletion, e.g a `deque`, the elements are
    removed with `pop()` instead
    """
    try:
        del seq[size:]
    except TypeError:
        for _ in range(len(seq) - size):
            seq.pop()


def check_range(seq: SwappableSequence, begin: int = 0,
                end: Optional[int] = None) -> Tuple[int, int]:
    """validate the half-open range `[begin, end)` within `seq`

    Returns the tuple `(begin, end)`, with an `end` of None resolved to
    `len(seq)`.

    ## Exceptions

    raises `RangeError` unless `0 <= begin <= end <= len(seq)`. Negative
    positions are not interpreted relative to the end of the sequence.
    """
    size = len(seq)
    _end = size if end is None else end
    if not (0 <= begin <= _end <= size):
        raise RangeError("Invalid range for sequence", begin=begin, end=_end, size=size)
    return (begin, _end,)


# autopep8: off
# fmt: off
__all__ = ["Swap"]
export(__name__, SwappableSequence, swap_items, shrink, check_range)
