"""Iterator utilities"""

from .naming import export

from typing import (
    Any, Callable, Generator, Iterable, Mapping
)
from typing_extensions import TypeAlias, TypeVar


T = TypeVar("T")


Yields: TypeAlias = Generator[T, None, None]


def unique_adjacent(source: Iterable[T],
                    equal: Callable[[T, T], Any]) -> Yields[T]:
    """yield the first element of each run of adjacent equal elements

    Each element from `source` is compared with the element most recently
    yielded, as `equal(kept, elt)`. The element is yielded only when
    that call returns a falsey value.

    For a sorted `source`, this yields one element per equivalence class
    of `equal`, each being the earliest element of its class in `source`.
    """
    not_found = object()
    kept = not_found
    for elt in source:
        if kept is not_found or not equal(kept, elt):
            kept = elt
            yield elt


T_k = TypeVar("T_k")
T_v = TypeVar("T_v")


def merge_map(source: Mapping[T_k, T_v], dest: Mapping[T_k, T_v]):
    """merge a `source` mapping into a `dest` mapping

    Operates like `dict.update()`, except that a mapping value in `source`
    is merged recursively into any mapping stored for the same key in `dest`.

    Returns `dest`, which must be mutable. Reference loops in `source`
    are not detected.
    """
    not_found = object()
    for key, value in source.items():
        dvalue = dest.get(key, not_found)
        if isinstance(value, Mapping) and dvalue is not not_found and isinstance(dvalue, Mapping):
            merge_map(value, dvalue)
        else:
            dest[key] = value
    del not_found
    return dest


# autopep8: off
# fmt: off
__all__ = ["Yields"]
export(__name__, unique_adjacent, merge_map)
