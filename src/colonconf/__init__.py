# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:51:14
# @Author : Kariko Lin

"""`key: value` config files, with arrays and sections,
and a loader to copy them into dataclasses."""

import logging

from .errors import (
    Result,
    ConfError,
    ConfIOError,
    ConfSyntaxError,
    ConfLookupError,
    ConfTypeError,
    SchemaError
)
from .conf import Item, ConfSection, Conf, ConfParser, loads
from .loader import load, load_file, load_default
from .raising import (
    StrictConf,
    parse_or_raise,
    loads_or_raise,
    load_or_raise,
    load_default_or_raise
)

__all__ = [
    'Result', 'ConfError', 'ConfIOError', 'ConfSyntaxError',
    'ConfLookupError', 'ConfTypeError', 'SchemaError',
    'Item', 'ConfSection', 'Conf', 'ConfParser', 'loads',
    'load', 'load_file', 'load_default',
    'StrictConf', 'parse_or_raise', 'loads_or_raise',
    'load_or_raise', 'load_default_or_raise'
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
