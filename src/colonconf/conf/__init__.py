# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 00:40:02
# @Author : Kariko Lin

from .model import Item, ConfSection, Conf
from .parser import ParseState, ConfParser, loads
