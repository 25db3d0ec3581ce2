# -*- encoding: utf-8 -*-
# @File   : raising.py
# @Time   : 2026/10/15 10:31:52
# @Author : Kariko Lin

"""Raise instead of return.

Every call here is the core call plus `Result.unwrap()` (or a `raise`
of the returned error). Handy in scripts where a broken config should
just blow up:

    ```python
    conf = StrictConf(parse_or_raise('app.conf'))
    port = conf.get_int('port')  # ConfLookupError / ConfTypeError
    ```
"""

from os import PathLike
from typing import Any

from .conf import Conf, ConfParser, ConfSection, Item, loads
from .conf.consts import DEFAULT_ELEMENT_SEP
from .errors import ConfError
from .loader import load, load_default


def _check(err: ConfError | None) -> None:
    if err is not None:
        raise err


def parse_or_raise(
    filename: str | PathLike[str], encoding: str | None = None,
    *, element_sep: str = DEFAULT_ELEMENT_SEP
) -> Conf:
    return ConfParser(filename, encoding, element_sep=element_sep) \
        .read().unwrap()


def loads_or_raise(
    text: str, *, element_sep: str = DEFAULT_ELEMENT_SEP
) -> Conf:
    return loads(text, element_sep=element_sep).unwrap()


def load_or_raise(
    target: Any, source: Conf | str | PathLike[str],
    encoding: str | None = None
) -> Any:
    """`load()` from a `Conf`, or a file parsed on the fly.

    Gives `target` back for chaining.
    """
    if not isinstance(source, Conf):
        source = parse_or_raise(source, encoding)
    _check(load(target, source))
    return target


def load_default_or_raise(
    target: Any, source: Conf | str | PathLike[str], default: Any,
    encoding: str | None = None
) -> Any:
    _check(load_default(target, source, default, encoding))
    return target


class StrictConf:
    """Wraps a `Conf`; typed getters give plain values or raise."""

    def __init__(self, conf: Conf) -> None:
        self.conf = conf

    def __repr__(self) -> str:
        return f'StrictConf({self.conf!r})'

    @property
    def current(self) -> ConfSection:
        return self.conf.current

    def items(self) -> list[Item]:
        return self.conf.items()

    def has_item(self, key: str) -> bool:
        return self.conf.has_item(key)

    def has_section(self, name: str) -> bool:
        return self.conf.has_section(name)

    def section(self, name: str) -> None:
        _check(self.conf.section(name))

    def set_global_section(self) -> None:
        self.conf.set_global_section()

    def get_item(self, key: str) -> Item:
        return self.conf.get_item(key).unwrap()

    def get_int(self, key: str) -> int:
        return self.conf.get_int(key).unwrap()

    def get_float(self, key: str) -> float:
        return self.conf.get_float(key).unwrap()

    def get_string(self, key: str) -> str:
        return self.conf.get_string(key).unwrap()

    def get_int_array(self, key: str) -> list[int]:
        return self.conf.get_int_array(key).unwrap()

    def get_float_array(self, key: str) -> list[float]:
        return self.conf.get_float_array(key).unwrap()

    def get_string_array(self, key: str) -> list[str]:
        return self.conf.get_string_array(key).unwrap()
