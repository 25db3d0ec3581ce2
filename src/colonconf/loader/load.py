# -*- encoding: utf-8 -*-
# @File   : load.py
# @Time   : 2026/10/14 20:47:33
# @Author : Kariko Lin

"""Fill a dataclass instance from a `Conf`.

    ```python
    @dataclass
    class Section1Conf:
        int_val: int = 0
        string_val: str = ''

    @dataclass
    class ConfigObj:
        StringItem: str = 'default value'
        IntArray: list[int] = field(default_factory=list)
        Section1: Section1Conf = field(default_factory=Section1Conf)

    obj = ConfigObj()
    if (err := load_file(obj, 'config.conf')) is not None:
        ...
    ```

A field `AExampleField` is looked up as `a_example_field`, then
`aexamplefield`, then `AExampleField`. Fields the file doesn't mention
keep whatever they held.

Loading is not atomic: on error, fields assigned before the failing one
stay assigned.
"""

from collections.abc import Callable
from copy import deepcopy
from dataclasses import is_dataclass
from logging import getLogger
from os import PathLike
from typing import Any

from ..conf import Conf, ConfParser
from ..conf.consts import DEFAULT_ELEMENT_SEP
from ..errors import ConfError, ConfLookupError, ConfTypeError, Result
from ..errors import SchemaError
from .fields import FieldDescriptor, FieldKind, describe, resolve_name

logger = getLogger(__name__)

_GETTERS: dict[FieldKind, Callable[[Conf, str], Result]] = {
    FieldKind.INT: Conf.get_int,
    FieldKind.FLOAT: Conf.get_float,
    FieldKind.STR: Conf.get_string,
    FieldKind.INT_LIST: Conf.get_int_array,
    FieldKind.FLOAT_LIST: Conf.get_float_array,
    FieldKind.STR_LIST: Conf.get_string_array,
}


def _is_record(obj: object) -> bool:
    return is_dataclass(obj) and not isinstance(obj, type)


def _descriptors(cls: type, nested: bool) -> Result:
    try:
        return Result(describe(cls, nested))
    except NameError as e:
        return Result.fail(
            SchemaError(f'unable to resolve fields of {cls.__name__}: {e}'))
    except SchemaError as e:
        return Result.fail(e)


def _load_value(
    obj: object, fd: FieldDescriptor, name: str, conf: Conf
) -> ConfError | None:
    getter = _GETTERS.get(fd.kind)
    if getter is None:
        return ConfTypeError(f'not support type of field: {fd.name}')
    val, err = getter(conf, name)
    if err is not None:
        err.add_note(f'while loading field "{fd.name}" from "{name}"')
        return err
    setattr(obj, fd.name, val)
    return None


def _load_section(
    obj: object, fd: FieldDescriptor, name: str,
    conf: Conf, assigned: set[str], path: str
) -> ConfError | None:
    if not conf.has_section(name):
        return ConfLookupError(
            f'field "{fd.name}" is a record, but "{name}" is not a section')

    sub = getattr(obj, fd.name, None)
    if not isinstance(sub, fd.record_type):
        try:
            sub = fd.record_type()
        except TypeError as e:
            return SchemaError(
                f'unable to create {fd.record_type.__name__} '
                f'for field "{fd.name}": {e}')

    # attached first, so fields loaded before a failure stay visible.
    setattr(obj, fd.name, sub)
    conf.section(name)
    try:
        return _load_record(sub, conf, assigned, path + '.', nested=True)
    finally:
        conf.set_global_section()


def _load_record(
    obj: object, conf: Conf, assigned: set[str],
    prefix: str = '', nested: bool = False
) -> ConfError | None:
    descriptors, err = _descriptors(type(obj), nested)
    if err is not None:
        return err

    for fd in descriptors:
        if not fd.assignable:
            return SchemaError(f'field not settable, field: {fd.name}')

        name = resolve_name(fd.name, conf)
        if name is None:
            continue
        logger.debug('field %s%s <- "%s"', prefix, fd.name, name)

        if fd.kind is FieldKind.RECORD:
            err = _load_section(
                obj, fd, name, conf, assigned, prefix + fd.name)
        else:
            err = _load_value(obj, fd, name, conf)
        if err is not None:
            return err
        assigned.add(prefix + fd.name)
    return None


def load(target: Any, conf: Conf) -> ConfError | None:
    """Fill dataclass instance `target` from `conf`.

    Always starts from (and ends in) the global section.
    """
    if not _is_record(target):
        return SchemaError('target must be a dataclass instance')
    conf.set_global_section()
    return _load_record(target, conf, set())


def _parse(
    source: Conf | str | PathLike[str], encoding: str | None,
    element_sep: str
) -> Result:
    if isinstance(source, Conf):
        return Result(source)
    return ConfParser(source, encoding, element_sep=element_sep).read()


def load_file(
    target: Any, filename: str | PathLike[str],
    encoding: str | None = None,
    *, element_sep: str = DEFAULT_ELEMENT_SEP
) -> ConfError | None:
    """Parse `filename` and `load()` it into `target`."""
    conf, err = _parse(filename, encoding, element_sep)
    if err is not None:
        return err
    return load(target, conf)


def _fill_defaults(
    obj: object, default: object, assigned: set[str], prefix: str = ''
) -> None:
    for fd in describe(type(obj), bool(prefix)):
        path = prefix + fd.name
        if path not in assigned:
            setattr(obj, fd.name, deepcopy(getattr(default, fd.name)))
        elif fd.kind is FieldKind.RECORD:
            sub_default = getattr(default, fd.name)
            if _is_record(sub_default):
                _fill_defaults(
                    getattr(obj, fd.name), sub_default, assigned, path + '.')


def load_default(
    target: Any, source: Conf | str | PathLike[str], default: Any,
    encoding: str | None = None,
    *, element_sep: str = DEFAULT_ELEMENT_SEP
) -> ConfError | None:
    """Like `load()`, then copy every field the config didn't set
    from `default`, an instance of the same dataclass.

    `source` is a parsed `Conf` or a file to parse.
    """
    if not _is_record(target) or type(target) is not type(default):
        return SchemaError(
            'target and default must be instances of the same dataclass')
    conf, err = _parse(source, encoding, element_sep)
    if err is not None:
        return err

    assigned: set[str] = set()
    conf.set_global_section()
    if (err := _load_record(target, conf, assigned)) is not None:
        return err
    _fill_defaults(target, default, assigned)
    return None
