# -*- encoding: utf-8 -*-
# @File   : fields.py
# @Time   : 2026/10/14 19:25:10
# @Author : Kariko Lin

"""Field descriptor table of a target dataclass.

Built once per type (and cached), so `load()` never inspects
annotations again for a type it has seen.
"""

from dataclasses import Field, fields, is_dataclass
from enum import Enum, auto
from functools import cache
from types import NoneType, UnionType
from typing import TYPE_CHECKING, NamedTuple, Union, get_args, get_origin
from typing import get_type_hints

from ..errors import SchemaError

if TYPE_CHECKING:
    from ..conf import Conf


class FieldKind(Enum):
    INT = auto()
    FLOAT = auto()
    STR = auto()
    INT_LIST = auto()
    FLOAT_LIST = auto()
    STR_LIST = auto()
    RECORD = auto()
    UNSUPPORTED = auto()


# `bool` hashes apart from `int`, so it falls to UNSUPPORTED.
_SCALARS = {int: FieldKind.INT, float: FieldKind.FLOAT, str: FieldKind.STR}
_LISTS = {
    int: FieldKind.INT_LIST,
    float: FieldKind.FLOAT_LIST,
    str: FieldKind.STR_LIST
}


class FieldDescriptor(NamedTuple):
    name: str
    kind: FieldKind
    record_type: type | None = None
    assignable: bool = True


def _unwrap_optional(tp: object) -> object:
    """`int | None` -> `int`. Other unions are left alone."""
    if get_origin(tp) in (Union, UnionType):
        args = [i for i in get_args(tp) if i is not NoneType]
        if len(args) == 1:
            return args[0]
    return tp


def _kind_of(tp: object, nested: bool) -> tuple[FieldKind, type | None]:
    tp = _unwrap_optional(tp)
    if tp in _SCALARS:
        return _SCALARS[tp], None
    if get_origin(tp) is list:
        args = get_args(tp)
        if len(args) == 1 and args[0] in _LISTS:
            return _LISTS[args[0]], None
        return FieldKind.UNSUPPORTED, None
    # sections can't nest, so a record inside a record is out.
    if isinstance(tp, type) and is_dataclass(tp) and not nested:
        return FieldKind.RECORD, tp
    return FieldKind.UNSUPPORTED, None


@cache
def describe(cls: type, nested: bool = False) -> tuple[FieldDescriptor, ...]:
    """Descriptors of dataclass `cls`, in declaration order.

    `nested` marks `cls` as being loaded from inside a section.

    May raise `NameError` on unresolvable string annotations, and
    `SchemaError` when an annotation got shadowed by a field default.
    """
    hints = get_type_hints(cls)
    frozen = cls.__dataclass_params__.frozen
    ret = []
    for f in fields(cls):
        tp = hints.get(f.name, f.type)
        # `Sect: Sect = field(...)` evaluates the annotation after the
        # class body bound `Sect` to the field itself.
        if isinstance(tp, Field):
            raise SchemaError(
                f'annotation of field "{f.name}" in {cls.__name__} is a '
                'dataclasses.Field, the field name shadows its type; '
                'rename the type or the field')
        kind, record = _kind_of(tp, nested)
        ret.append(FieldDescriptor(f.name, kind, record, not frozen))
    return tuple(ret)


def config_names(field: str) -> list[str]:
    """Candidate config names of `field`, by priority.

    `AExampleField` -> `a_example_field`, `aexamplefield`, `AExampleField`.
    """
    snake = ''
    for c in field:
        if 'A' <= c <= 'Z':
            if snake:
                snake += '_'
            snake += c.lower()
        else:
            snake += c
    ret: dict[str, None] = {}
    for i in (snake, field.lower(), field):
        ret.setdefault(i, None)
    return list(ret)


def resolve_name(field: str, conf: 'Conf') -> str | None:
    """First candidate name that is an item of the current section,
    or any section. `None` if the file doesn't mention the field."""
    for i in config_names(field):
        if conf.has_item(i) or conf.has_section(i):
            return i
    return None
