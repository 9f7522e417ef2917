# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2025/03/02 14:10:26
# @Author : inireader contributors

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """A reader bound to one file name.

    Only the reading half is kept: documents are built once and
    never written back.
    """
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
