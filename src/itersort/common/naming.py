## naming.py - itersort.common

"""utilities for publishing module names"""

import sys
from enum import Enum
from types import ModuleType
from typing import Generator, List, Optional, Sequence, Union
from typing_extensions import Annotated, TypeAlias, TypeVar


class NameError(LookupError):
    """`LookupError` for a module or object that cannot be named"""

    pass


ModuleArg: Annotated[TypeAlias, "Module or module name"] = Union[str, ModuleType]


def get_module(ident: ModuleArg) -> ModuleType:
    """return the module denoted by `ident`

    `ident` may be a module, or the name of a module present in `sys.modules`

    ## Exceptions

    - Raises `NameError` if `ident` is a string not found in `sys.modules`
    """
    if isinstance(ident, str):
        if ident in sys.modules:
            return sys.modules[ident]
        else:
            raise NameError(f"Module not found for name: {ident!r}", ident)
    else:
        return ident


def _name_gen(v_all: Optional[Sequence], *objects) -> Generator[str, None, None]:
    ## yields each name from `objects` not already in `v_all`
    ##
    ## strings are used as provided, sequences are flattened, and any
    ## other object must have a __name__
    for o in objects:
        name = None
        if isinstance(o, str):
            name = o
        elif isinstance(o, Sequence):
            yield from _name_gen(v_all, *o)
        elif hasattr(o, "__name__"):
            name = o.__name__
        else:
            raise NameError(f"Unable to determine name for {o!r}", o)
        if name is not None:
            if (v_all is None) or (name not in v_all):
                yield name


def export(module: ModuleArg, obj, *objects) -> Sequence[str]:
    """add names to the `__all__` attribute of a module

    ## Usage

    `module`
    :   a module object, or the name of a module in `sys.modules`

    `obj`, `objects`
    :   strings are exported as given. Sequences are processed recursively.
        Any other object is exported by its `__name__`.

    An existing `__all__` is extended, keeping its type when it is not
    a list. Names already present are not added twice. If the module has no
    `__all__`, a new list is bound.

    Returns the updated `__all__` value.

    ## Exceptions

    - raises `NameError` if `module` names no loaded module
    - raises `ValueError` if some object in `objects` cannot be named

    ## Example

    ```python
    from itersort.common.naming import export

    def stable_uniquify(seq):
        ...

    export(__name__, stable_uniquify, "Compare")
    ```
    """
    m = get_module(module)
    try:
        v_all = None
        if hasattr(m, "__all__"):
            v_all = m.__all__
            names = _name_gen(v_all, obj, *objects)
            if isinstance(v_all, List):
                v_all.extend(names)
            else:
                all_list = list(v_all)
                all_list.extend(names)
                v_all = v_all.__class__(all_list)
        else:
            v_all = list(_name_gen(None, obj, *objects))
        m.__all__ = v_all
        return v_all
    except NameError as exc:
        raise ValueError(f"Unable to export symbols from {m.__name__!s}", m) from exc


T = TypeVar("T")


def module_all(
    # fmt: off
    module: ModuleArg,
    default: Optional[T] = None
    # fmt: on
) -> Optional[Union[List[str], T]]:
    """return the `__all__` of a module, or `default` when it has none

    ## Exceptions

    - raises `NameError` if `module` names no loaded module
    """
    _m = get_module(module)
    if hasattr(_m, "__all__"):
        return _m.__all__
    else:
        return default


def bind_enum(enum: Enum, module: ModuleArg):
    """bind the value of each member of `enum` as a constant in `module`"""
    m = get_module(module)
    members = enum.__members__
    for name in members:
        setattr(m, name, members[name].value)


def origin_name(object) -> str:
    """return the dotted name of an object, prefixed with its module name

    Objects defined in `builtins` are named without a prefix.
    """
    if hasattr(object, "__name__"):
        name = object.__name__
        prefix = None
        if hasattr(object, "__module__"):
            m = object.__module__
            if m != "builtins":
                prefix = origin_name(get_module(m))
        if prefix:
            return prefix + "." + name
        else:
            return name
    else:
        raise ValueError("Object does not provide a __name__: %s" % repr(object), object)


# autopep8: off
# fmt: off
export(__name__,
       NameError, 'ModuleArg', get_module, export, module_all,
       bind_enum, origin_name
       )
