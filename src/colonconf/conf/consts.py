# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:20:08
# @Author : Kariko Lin

KV_SEP = ':'
COMMENT = '#'
SPACE_CHARS = ' \t\n\r'

COMPOSITE_LEFT = '['
COMPOSITE_RIGHT = ']'
ARRAY_TAG = '@'
DEFAULT_ELEMENT_SEP = ' '

# no header could declare it, since empty section names are rejected.
GLOBAL_SECTION = ''

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
