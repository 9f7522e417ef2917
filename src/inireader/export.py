# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2025/03/03 10:12:57
# @Author : inireader contributors

"""Plain views of a built document, for inspection.

This is not an INI writer: `to_yaml()` is meant for eyes and diffs.
"""

import yaml

from .model import IniDocument

__all__ = ['to_dict', 'to_yaml']


def to_dict(doc: IniDocument) -> dict[str, dict[str, str]]:
    """Copy `doc` into nested plain dicts, file order kept."""
    return {name: dict(sect) for name, sect in doc.items()}


def to_yaml(doc: IniDocument) -> str:
    # raw values stay str, yaml quotes `1`, `yes`, `on` etc. on its own.
    return yaml.safe_dump(
        to_dict(doc),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False)
