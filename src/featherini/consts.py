# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:14:37
# @Author : Kariko Lin

from enum import Enum, IntFlag


class ParseFlag(IntFlag):
    """Comment stripping applied to every line before tokenizing."""
    NONE = 0
    COMMENTS_SLASH = 1  # cut at `//`
    COMMENTS_HASH = 2   # cut at `#`
    COMMENTS_ALL = 4    # both of above


class SaveFlag(IntFlag):
    """Output style. Flags combine freely."""
    NONE = 0
    PRUNE = 1              # skip empty sections and empty values
    PADDING_SECTIONS = 2   # blank line after each section block
    SPACE_SECTIONS = 4     # `[ name ]`
    SPACE_KEYS = 8         # `key = value`
    TAB_KEYS = 16          # indent keys of named sections
    SEMICOLON_KEYS = 32    # `key=value;`


class SourceKind(str, Enum):
    FILE = 'file'
    MEMORY = 'memory'


# whitespace, plus `;` which the format treats as a soft comment mark.
TRIM_CHARS = '\t\v\f; '
DEFAULT_SECTION = ''
