# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:03:17
# @Author : Kariko Lin

"""
Items, sections, and the whole parsed document.

Values are kept as text. Typed access (`to_int()`, `get_int()` etc.)
converts on every call; nothing is cached, so do it yourself if you
read the same key in a hot loop.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from math import isinf
from re import IGNORECASE
from re import compile as regex
from warnings import warn

from ..errors import ConfError, ConfLookupError, ConfTypeError, Result
from .consts import (
    DEFAULT_ELEMENT_SEP, GLOBAL_SECTION,
    INT64_MAX, INT64_MIN, SPACE_CHARS
)
from .keys import element_separator, is_composite, normalize_key

_INT = regex(r'[+-]?[0-9]+')
_FLOAT = regex(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)',
    IGNORECASE)


def parse_int(text: str) -> Result:
    """Base-10, signed 64-bit. No spaces, no `_`, no `0x`."""
    if _INT.fullmatch(text) is None:
        return Result.fail(ConfTypeError(f'invalid int value: {text!r}'))
    val = int(text)
    if not INT64_MIN <= val <= INT64_MAX:
        return Result.fail(ConfTypeError(f'int value out of range: {text}'))
    return Result(val)


def parse_float(text: str) -> Result:
    if _FLOAT.fullmatch(text) is None:
        return Result.fail(ConfTypeError(f'invalid float value: {text!r}'))
    val = float(text)
    # `1e400` silently becomes inf in Python.
    if isinf(val) and 'inf' not in text.lower():
        return Result.fail(
            ConfTypeError(f'float value out of range: {text}'))
    return Result(val)


@dataclass(frozen=True)
class Item:
    """One `key: val` line.

    `raw_key` is the key as written (`[@arr@,]`), `key` is what you look
    it up by (`arr`).
    """
    raw_key: str
    key: str
    val: str
    element_sep: str = DEFAULT_ELEMENT_SEP

    @classmethod
    def from_raw(
        cls, raw_key: str, val: str,
        element_sep: str = DEFAULT_ELEMENT_SEP
    ) -> 'Item':
        return cls(raw_key, normalize_key(raw_key), val, element_sep)

    def __str__(self) -> str:
        return f'{self.key}=>{self.val}'

    @property
    def is_array(self) -> bool:
        return is_composite(self.raw_key)

    def separator(self) -> Result:
        return element_separator(self.raw_key, self.element_sep)

    def to_int(self) -> Result:
        return parse_int(self.val)

    def to_float(self) -> Result:
        return parse_float(self.val)

    def to_string(self) -> str:
        return self.val

    def to_string_array(self) -> Result:
        """Split `val` by the element separator.

        Segments that are empty (or blank) after trimming are dropped,
        so `1,,2` with `,` gives `['1', '2']`.
        """
        sep, err = self.separator()
        if err is not None:
            return Result.fail(err)
        return Result([
            i.strip(SPACE_CHARS) for i in self.val.split(sep)
            if i.strip(SPACE_CHARS)
        ])

    def __to_array(self, convert: Callable[[str], Result]) -> Result:
        eles, err = self.to_string_array()
        if err is not None:
            return Result.fail(err)
        ret = []
        for i in eles:
            val, err = convert(i)
            if err is not None:
                return Result.fail(err)
            ret.append(val)
        return Result(ret)

    def to_int_array(self) -> Result:
        return self.__to_array(parse_int)

    def to_float_array(self) -> Result:
        return self.__to_array(parse_float)


class ConfSection(Mapping[str, Item]):
    """Items under one `[section]` header, keyed by normalized key.

    Read only to users; the parser fills it through `_put()`.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._data: dict[str, Item] = {}
        self._first_seen: dict[str, int | None] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_global(self) -> bool:
        return self._name == GLOBAL_SECTION

    def __getitem__(self, key: str) -> Item:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def first_seen(self, key: str) -> int | None:
        """Line number where `key` first showed up in this section."""
        return self._first_seen.get(key)

    def _put(self, item: Item, lineno: int | None = None) -> None:
        if item.key in self._data:
            where = self._first_seen[item.key]
            warn(
                f'{self} key "{item.key}" redefined at line {lineno}, '
                f'first occurrence at line {where}; the latter wins.')
        else:
            self._first_seen[item.key] = lineno
        self._data[item.key] = item


class Conf:
    """A parsed config document.

    Keys outside any header live in the global section (`self.header`).
    Lookups only see the *current* section; switch it by `section()`
    and go back by `set_global_section()`.
    """

    def __init__(self, *, element_sep: str = DEFAULT_ELEMENT_SEP) -> None:
        if len(element_sep) != 1:
            raise ValueError(
                f'element separator must be one char, got {element_sep!r}')
        self.element_sep = element_sep
        self.__sections: dict[str, ConfSection] = {
            GLOBAL_SECTION: ConfSection(GLOBAL_SECTION)
        }
        self.__current = self.__sections[GLOBAL_SECTION]

    @property
    def header(self) -> ConfSection:
        """The global section."""
        return self.__sections[GLOBAL_SECTION]

    @property
    def current(self) -> ConfSection:
        return self.__current

    def __repr__(self) -> str:
        return '<Conf sections=%d current=%r>' % (
            len(self.__sections) - 1, self.__current)

    # ---- filled by parser ----
    def _add_section(self, name: str) -> ConfSection:
        """Register `name` and make it current. Caller checks duplicates."""
        sect = self.__sections[name] = ConfSection(name)
        self.__current = sect
        return sect

    def _add_item(
        self, raw_key: str, val: str, lineno: int | None = None
    ) -> Item:
        item = Item.from_raw(raw_key, val, self.element_sep)
        self.__current._put(item, lineno)
        return item

    # ---- sections ----
    def has_section(self, name: str) -> bool:
        return name in self.__sections

    def section_names(self) -> list[str]:
        """Declared section names, in file order. Global one excluded."""
        return [k for k, v in self.__sections.items() if not v.is_global]

    def get_section(self, name: str) -> Result:
        if name not in self.__sections:
            return Result.fail(
                ConfLookupError(f'non-exist section: {name}'))
        return Result(self.__sections[name])

    def section(self, name: str) -> ConfError | None:
        """Switch current section to `name`."""
        sect, err = self.get_section(name)
        if err is not None:
            return err
        self.__current = sect
        return None

    def set_global_section(self) -> None:
        self.__current = self.header

    # ---- items in current section ----
    def items(self) -> list[Item]:
        return list(self.__current.values())

    def has_item(self, key: str) -> bool:
        return key in self.__current

    def get_item(self, key: str) -> Result:
        if key not in self.__current:
            return Result.fail(ConfLookupError(
                f'non-exist key: {key} (in {self.__current!r})'))
        return Result(self.__current[key])

    def __coerce(
        self, key: str, convert: Callable[[Item], Result]
    ) -> Result:
        item, err = self.get_item(key)
        if err is not None:
            return Result.fail(err)
        return convert(item)

    def get_int(self, key: str) -> Result:
        return self.__coerce(key, Item.to_int)

    def get_float(self, key: str) -> Result:
        return self.__coerce(key, Item.to_float)

    def get_string(self, key: str) -> Result:
        return self.__coerce(key, lambda x: Result(x.to_string()))

    def get_int_array(self, key: str) -> Result:
        return self.__coerce(key, Item.to_int_array)

    def get_float_array(self, key: str) -> Result:
        return self.__coerce(key, Item.to_float_array)

    def get_string_array(self, key: str) -> Result:
        return self.__coerce(key, Item.to_string_array)
