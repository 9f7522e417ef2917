# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2025/03/02 15:02:41
# @Author : inireader contributors

"""Raw value conversions used by `IniDocument.read()`.

The strategy is picked from the *type* of the caller's default value:

    ```python
    doc.read('net', 'port', 8080)         # int
    doc.read('net', 'ratio', 0.5)         # float
    doc.read('net', 'enabled', False)     # bool
    doc.read('net', 'mode', Char('a'))    # single character
    doc.read('net', 'host', 'localhost')  # text
    doc.read('net', 'ttl', c_uint8(64))   # fixed width integer
    ```

None of these raise. Anything that cannot be converted, or a default of a
type not listed above, gives the default back untouched.
"""

from ctypes import _SimpleCData, sizeof
from math import isfinite, isinf
from re import IGNORECASE
from re import compile as regex
from string import ascii_lowercase, ascii_uppercase
from typing import Any, Callable, TypeAlias, TypeVar

__all__ = [
    'Char', 'TRUE_LITERALS',
    'convert', 'strategy_for',
    'to_bool', 'to_char', 'to_int', 'to_float', 'to_text',
    'to_cint', 'to_cfloat', 'keep_default',
    'parse_int_prefix', 'parse_float_prefix',
]

TRUE_LITERALS = ('true', '1', 'on', 'yes')

# no leading '+' nor whitespace.
_SIGNED_INT = regex(r'-?[0-9]+')
_UNSIGNED_INT = regex(r'[0-9]+')
_FLOAT = regex(
    r'-?(?:'
    r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?'
    r'|inf(?:inity)?'
    r'|nan(?:\([0-9A-Za-z_]*\))?'
    r')',
    IGNORECASE)

_ASCII_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)

# ctypes `_type_` codes.
_CINT_CODES = frozenset('bBhHiIlLqQ')
_CFLOAT_CODES = frozenset('fdg')
_FLT_MAX = 3.4028234663852886e38

Strategy: TypeAlias = Callable[[str, Any, bool], Any]
T = TypeVar('T')


class Char(str):
    """Exactly one character.

    Pass one as the default to ask for the first character of a value,
    since a plain `str` default always means the whole text.
    """
    def __new__(cls, value: str = '\0') -> 'Char':
        if len(value) != 1:
            raise ValueError(f'Char needs exactly one character, got {value!r}')
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f'Char({str(self)!r})'


def parse_int_prefix(raw: str, signed: bool = True) -> int | None:
    """Longest base-10 integer at the start of `raw`, or `None`."""
    if not (m := (_SIGNED_INT if signed else _UNSIGNED_INT).match(raw)):
        return None
    try:
        return int(m.group())
    except ValueError:  # past `sys.get_int_max_str_digits()`, out of range
        return None


def parse_float_prefix(raw: str) -> float | None:
    """Longest float literal at the start of `raw`, or `None`.

    `1e` gives 1.0: an exponent without digits is left as trailing text.
    A finite literal too large for a float (`1e999`) is out of range and
    gives `None` as well; only `inf` spelled out is infinite.
    """
    if not (m := _FLOAT.match(raw)):
        return None
    token = m.group()
    if '(' in token:  # nan(payload), which float() refuses.
        token = token[:token.index('(')]
    value = float(token)
    # digits that overflowed, not an `inf` literal
    if isinf(value) and not token.lstrip('-')[0].isalpha():
        return None
    return value


def to_bool(raw: str, default: bool, fold_case: bool = False) -> bool:
    # exact lowercase literals only, `True` is false.
    return raw in TRUE_LITERALS


def to_char(raw: str, default: Char, fold_case: bool = False) -> Char:
    return Char(raw[0]) if raw else default


def to_int(raw: str, default: int, fold_case: bool = False) -> int:
    value = parse_int_prefix(raw)
    return default if value is None else value


def to_float(raw: str, default: float, fold_case: bool = False) -> float:
    value = parse_float_prefix(raw)
    return default if value is None else value


def to_text(raw: str, default: str, fold_case: bool = False) -> str:
    # ASCII folding only.
    if fold_case and any(c in ascii_uppercase for c in raw):
        return raw.translate(_ASCII_LOWER)
    return raw


def to_cint(raw: str, default: _SimpleCData, fold_case: bool = False):
    """Same as `to_int()`, but the value has to fit `type(default)`."""
    ctype = type(default)
    bits = 8 * sizeof(ctype)
    signed = ctype._type_.islower()
    value = parse_int_prefix(raw, signed)
    if value is None:
        return default
    if signed:
        low, high = -(1 << bits - 1), (1 << bits - 1) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        return default
    return ctype(value)


def to_cfloat(raw: str, default: _SimpleCData, fold_case: bool = False):
    """Same as `to_float()`, but finite values have to fit `type(default)`."""
    ctype = type(default)
    if (value := parse_float_prefix(raw)) is None:
        return default
    if sizeof(ctype) == 4 and isfinite(value) and abs(value) > _FLT_MAX:
        return default
    return ctype(value)


def keep_default(raw: str, default: Any, fold_case: bool = False) -> Any:
    return default


# keyed by exact type, so `bool` never falls into `int`
# and `Char` never falls into `str`.
_STRATEGIES: dict[type, Strategy] = {
    bool: to_bool,
    Char: to_char,
    int: to_int,
    float: to_float,
    str: to_text,
}


def strategy_for(default: Any) -> Strategy:
    """Pick the conversion for the type of `default`."""
    if (ret := _STRATEGIES.get(type(default))) is not None:
        return ret
    if isinstance(default, _SimpleCData):
        code = getattr(type(default), '_type_', '')
        if code in _CINT_CODES:
            return to_cint
        if code in _CFLOAT_CODES:
            return to_cfloat
    return keep_default


def convert(raw: str, default: T, fold_case: bool = False) -> T:
    """Convert `raw` to the type of `default`, or give `default` back."""
    return strategy_for(default)(raw, default, fold_case)
