# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/03 14:26:51
# @Author : Kariko Lin

"""Default flags & options, as an immutable value passed to `IniFile`.

Loadable from YAML, like:

    ```yaml
    parse: comments-all
    save: [prune, space-keys, padding-sections]
    encoding: utf-8
    strict_conversion: false
    ```
"""

import logging
from dataclasses import dataclass, fields, replace
from enum import IntFlag
from os import PathLike
from typing import Any, Mapping

import yaml

from .consts import ParseFlag, SaveFlag
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# spelling used in docs & older configs.
_FLAG_ALIASES = {
    'PAD_SECTIONS': 'PADDING_SECTIONS',
    'PADDING': 'PADDING_SECTIONS',
    'SLASH': 'COMMENTS_SLASH',
    'HASH': 'COMMENTS_HASH',
    'ALL': 'COMMENTS_ALL',
}

# mapping key -> dataclass field
_KEY_ALIASES = {
    'parse': 'parse_flags',
    'save': 'save_flags',
    'strict': 'strict_conversion',
}


def parse_flags[F: IntFlag](flag_type: type[F], value: Any) -> F:
    """Build a flag from an int, a name, `a|b` / `a,b` or a list of names.

    Names are case-insensitive, `-` and `_` are both accepted.
    """
    if value is None:
        return flag_type(0)
    if isinstance(value, flag_type):
        return value
    if isinstance(value, bool):
        raise ConfigurationError(f'Bad {flag_type.__name__}: {value!r}')
    if isinstance(value, int):
        allbits = 0
        for i in flag_type:
            allbits |= i.value
        if value < 0 or value & ~allbits:
            raise ConfigurationError(
                f'Unknown bits in {flag_type.__name__}: {value}')
        return flag_type(value)
    if isinstance(value, str):
        value = value.replace('|', ',').split(',')
    if not isinstance(value, (list, tuple, set)):
        raise ConfigurationError(f'Bad {flag_type.__name__}: {value!r}')

    ret = flag_type(0)
    for name in value:
        if isinstance(name, int) and not isinstance(name, bool):
            ret |= parse_flags(flag_type, name)
            continue
        key = str(name).strip().upper().replace('-', '_')
        if not key:
            continue
        key = _FLAG_ALIASES.get(key, key)
        try:
            ret |= flag_type[key]
        except KeyError:
            raise ConfigurationError(
                f'Unknown {flag_type.__name__} "{name}"') from None
    return ret


@dataclass(frozen=True, kw_only=True)
class IniConfig:
    """Per-document defaults.

    `parse_flags` and `save_flags` are used whenever `IniFile.parse()` or
    `IniFile.save()` gets no explicit flags. `encoding=None` means
    the platform default, with `chardet` detection as fallback.
    """
    parse_flags: ParseFlag = ParseFlag.NONE
    save_flags: SaveFlag = SaveFlag.NONE
    encoding: str | None = None
    strict_conversion: bool = False

    def replace(self, **changes: Any) -> 'IniConfig':
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'IniConfig':
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for k, v in data.items():
            name = _KEY_ALIASES.get(k, k)
            if name not in known:
                raise ConfigurationError(f'Unknown config key "{k}"')
            kwargs[name] = v

        if 'parse_flags' in kwargs:
            kwargs['parse_flags'] = parse_flags(
                ParseFlag, kwargs['parse_flags'])
        if 'save_flags' in kwargs:
            kwargs['save_flags'] = parse_flags(
                SaveFlag, kwargs['save_flags'])
        if kwargs.get('encoding') is not None:
            kwargs['encoding'] = str(kwargs['encoding'])
        if 'strict_conversion' in kwargs:
            if not isinstance(kwargs['strict_conversion'], bool):
                raise ConfigurationError(
                    '"strict_conversion" should be true or false.')
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, filename: str | PathLike[str]) -> 'IniConfig':
        try:
            with open(filename, 'r', encoding='utf-8') as fp:
                data = yaml.safe_load(fp)
        except OSError as e:
            raise ConfigurationError(
                f'Unable to read config "{filename}": {e}') from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f'Invalid YAML in "{filename}": {e}') from e

        if data is None:
            logger.debug('Empty config "%s", using defaults.', filename)
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f'Config "{filename}" should be a mapping.')
        return cls.from_mapping(data)


DEFAULT_CONFIG = IniConfig()
