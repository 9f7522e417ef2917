# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2025/03/02 14:45:12
# @Author : inireader contributors

"""Builds `IniDocument` out of INI text.

Line rules, top to bottom, no lookahead:
1. Cut at the first `;`, `#` or `//`, whichever comes first.
2. A line containing `[` is a header: the text up to the next `]`,
   trimmed, is the new current section. Without `]` the line is dropped.
3. Otherwise a line containing `=` is a pair, split at the first `=`.
4. Anything else is ignored.

Reading never fails: a file that cannot be opened gives an empty
document, and bytes that cannot be decoded are guessed with `chardet`.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from re import compile as regex

from chardet import detect as guess_codec

from .abstract import FileHandler
from .model import IniDocument

__all__ = [
    'IniParser', 'strip_comment', 'trim',
    'DEFAULT_SECTIONS', 'DEFAULT_KEYS', 'CODEC_CONFIDENCE',
]

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS = 32
DEFAULT_KEYS = 8
CODEC_CONFIDENCE = 0.8

# leftmost match wins, whichever marker it is.
_COMMENT = regex(r'[;#]|//')
_WHITESPACE = ' \t\n\v\f\r'


def strip_comment(line: str) -> str:
    if (m := _COMMENT.search(line)) is None:
        return line
    return line[:m.start()]


def trim(s: str) -> str:
    # ASCII blanks only, `str.strip()` would eat unicode spaces as well.
    return s.strip(_WHITESPACE)


def _check_hint(name: str, hint: int) -> int:
    if isinstance(hint, bool) or not isinstance(hint, int):
        raise TypeError(f'`{name}` should be an int, got {hint!r}')
    if hint <= 0:
        raise ValueError(f'`{name}` should be positive, got {hint}')
    return hint


class IniParser(FileHandler[IniDocument]):
    """Reads one INI file into an `IniDocument`.

    `sections` and `keys` are sizing hints (expected section count,
    expected keys per section). Python dicts grow on demand, so they
    are only validated and kept for `__repr__`; results never depend
    on them.
    """
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        sections: int = DEFAULT_SECTIONS,
        keys: int = DEFAULT_KEYS
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._sections = _check_hint('sections', sections)
        self._keys = _check_hint('keys', keys)

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: IniDocument | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。

        若传入`ins`，则键值对写入该文档（可叠加多个流）；否则新建一个。
        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = IniDocument()
        this_sect = ''
        lineno = 0
        while i := buf.readline():
            lineno += 1
            i = strip_comment(i)
            if not i:
                continue

            if (lb := i.find('[')) != -1:
                if (rb := i.find(']', lb)) == -1:
                    logger.debug(f'line {lineno}: unterminated header dropped')
                    continue
                this_sect = trim(i[lb + 1:rb])
                ins._open_section(this_sect)
            elif (eq := i.find('=')) != -1:
                ins._open_section(this_sect)._put(
                    trim(i[:eq]), trim(i[eq + 1:]))
        return ins

    @staticmethod
    def readstring(text: str, ins: IniDocument | None = None) -> IniDocument:
        """Same as `readstream()`, from a string already in memory."""
        # universal newlines, so a lone '\r' ends a line as well.
        return IniParser.readstream(StringIO(text, newline=None), ins)

    @staticmethod
    def _decode(raw: bytes, codec: str | None = None) -> str:
        """Decode file bytes. Never raises.

        Tries `codec` first, then whatever `chardet` guesses (UTF-8 when
        it is not sure), then UTF-8 with replacement characters.
        """
        if not raw:
            return ''
        text: str | None = None
        if codec is not None:
            try:
                text = raw.decode(codec)
            except (UnicodeDecodeError, LookupError) as e:
                logger.warning(f'cannot decode as {codec}, guessing: {e}')
        if text is None:
            guess = guess_codec(raw)
            if not guess['encoding'] or guess['confidence'] < CODEC_CONFIDENCE:
                guess = {'encoding': 'utf-8'}
            # fallbacks
            try:
                text = raw.decode(guess['encoding'])
            except (UnicodeDecodeError, LookupError):
                text = raw.decode('utf-8', errors='replace')
        return text.removeprefix('\ufeff')

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        注：文件不存在或无法读取时*不会*报错，仅记录 warning 并返回空文档。
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            logger.warning(f'INI file unreadable, left empty:\n  {e}')
            return IniDocument()
        return self.readstring(self._decode(raw, self._codec))

    def __repr__(self) -> str:
        return (
            f'IniParser({self._fn!r}, {self._codec!r}, '
            f'sections={self._sections}, keys={self._keys})')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
