# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2025/03/02 14:31:08
# @Author : inireader contributors

"""
Basically INI structure, read only.

Build one with `IniParser` (or `inireader.load()`), then query it with
`IniDocument.read()`.
"""

from collections.abc import Mapping
from typing import Iterable, Iterator, TypeVar

from .convert import convert

T = TypeVar('T')


class IniSection(Mapping[str, str]):
    """INI 小节字典。

    所有键值对均为`str: str`，值已去除首尾空白与注释。
    同一小节内重复的键，以后出现者为准。

    Read only to users; `IniParser` fills it through `_put()`.
    """
    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | Iterable[tuple[str, str]] = ()
    ) -> None:
        self._name = section_name
        self.__data: dict[str, str] = dict(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def _put(self, key: str, value: str) -> None:
        """for IniParser reading."""
        self.__data[key] = value


class IniDocument(Mapping[str, IniSection]):
    """A whole INI file. Accepts sections and pairs like:

        ```ini
        key = val     ; before any header, see `self.header`.

        [section]
        key233 = 666  # comments are `;`, `#` or `//`
        [section]     // reopened, keys accumulate
        other = val
        ```

    The document never changes once built: no set or delete.
    """
    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    @property
    def header(self) -> IniSection:
        """Pairs above the first header, i.e. the section named `""`."""
        if (sect := self.__sections.get('')) is None:
            return IniSection('')
        return sect

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return '<IniDocument { .sections = %d }>' % len(self.__sections)

    def read(
        self, section: str, key: str, default: T, fold_case: bool = False
    ) -> T:
        """Look up `[section] key` and convert it to the type of `default`.

        Never raises. Gives `default` back when the section or key is
        missing, when a number cannot be parsed from the start of the
        value, or when `type(default)` is not supported.
        See `inireader.convert` for the rules per type.

        `fold_case` only matters for `str` defaults: ASCII lowercase.
        """
        if (sect := self.__sections.get(section)) is None:
            return default
        if (raw := sect.get(key)) is None:
            return default
        return convert(raw, default, fold_case)

    def _open_section(self, name: str) -> IniSection:
        """for IniParser reading. Creates or reopens `name`."""
        if name not in self.__sections:
            self.__sections[name] = IniSection(name)
        return self.__sections[name]
