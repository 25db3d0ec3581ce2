# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/14 20:50:19
# @Author : Kariko Lin

from .fields import (
    FieldKind,
    FieldDescriptor,
    describe,
    config_names,
    resolve_name
)
from .load import load, load_file, load_default
