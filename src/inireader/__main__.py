# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2025/03/03 11:40:02
# @Author : inireader contributors

"""`python -m inireader get FILE SECTION KEY` / `python -m inireader dump FILE`"""

import argparse
import logging
import sys
from typing import Any, Sequence

from . import load, to_yaml
from .convert import Char, convert

# zero value per `--type`, also used when `--default` is not given.
TYPE_ZEROS: dict[str, Any] = {
    'bool': False,
    'char': Char('\0'),
    'int': 0,
    'float': 0.0,
    'str': '',
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='inireader', description='Query or dump an INI file.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    get = sub.add_parser('get', help='Print one value, converted')
    get.add_argument('file')
    get.add_argument('section', help='Section name, "" for keys above any header')
    get.add_argument('key')
    get.add_argument('-t', '--type', choices=list(TYPE_ZEROS), default='str',
                     help='Requested value type (default: str)')
    get.add_argument('-d', '--default',
                     help='Printed when the value is missing or unparsable')
    get.add_argument('-l', '--fold-case', action='store_true',
                     help='Lowercase str values')
    get.add_argument('-e', '--encoding', help='File encoding, guessed if omitted')

    dump = sub.add_parser('dump', help='Print the whole document as YAML')
    dump.add_argument('file')
    dump.add_argument('-e', '--encoding', help='File encoding, guessed if omitted')
    return parser


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(asctime)s] %(levelname)s: %(message)s')

    doc = load(args.file, args.encoding)
    if args.command == 'dump':
        sys.stdout.write(to_yaml(doc))
        return 0

    default = zero = TYPE_ZEROS[args.type]
    if args.default is not None:
        default = convert(args.default, zero)
    print(_format(doc.read(args.section, args.key, default, args.fold_case)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
