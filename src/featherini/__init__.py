# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 16:40:55
# @Author : Kariko Lin

from .config import DEFAULT_CONFIG, IniConfig
from .consts import DEFAULT_SECTION, TRIM_CHARS, ParseFlag, SaveFlag, SourceKind
from .errors import (
    ConfigurationError,
    ConversionError,
    DuplicateKey,
    DuplicateSection,
    IniError,
    NoSectionSelected
)
from .export import IniJsonParser, IniYamlParser
from .inifile import IniFile, IniSource
from .model import IniDocument, IniSection
from .parser import IniParser
from .util import convert_to, l_trim, r_trim, trim

__all__ = [
    'IniFile', 'IniSource', 'IniConfig', 'DEFAULT_CONFIG',
    'IniDocument', 'IniSection', 'IniParser',
    'IniJsonParser', 'IniYamlParser',
    'ParseFlag', 'SaveFlag', 'SourceKind', 'DEFAULT_SECTION', 'TRIM_CHARS',
    'IniError', 'DuplicateSection', 'DuplicateKey', 'NoSectionSelected',
    'ConversionError', 'ConfigurationError',
    'convert_to', 'trim', 'l_trim', 'r_trim',
]
