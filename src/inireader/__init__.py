# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/03/02 14:05:40
# @Author : inireader contributors

from os import PathLike

from .convert import Char
from .export import to_dict, to_yaml
from .model import IniDocument, IniSection
from .parser import DEFAULT_KEYS, DEFAULT_SECTIONS, IniParser

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'Char',
    'load', 'loads', 'to_dict', 'to_yaml',
]


def load(
    filename: str | PathLike[str],
    encoding: str | None = None, *,
    sections: int = DEFAULT_SECTIONS,
    keys: int = DEFAULT_KEYS
) -> IniDocument:
    """Read an INI file. Missing or unreadable files give an empty document."""
    return IniParser(
        filename, encoding, sections=sections, keys=keys).read()


def loads(text: str) -> IniDocument:
    return IniParser.readstring(text)
