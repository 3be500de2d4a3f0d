# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/11/04 20:47:09
# @Author : Kariko Lin

"""Dump an `IniDocument` as JSON or YAML, and read it back.

Both use the same shape, with `""` for the default section:

    ```json
    {"": {"key": "val"}, "section": {"key233": "val666"}}
    ```
"""

import json
from os import PathLike
from typing import Any

import yaml

from .abstract import FileHandler
from .errors import IniError
from .model import IniDocument


def _to_document(src: Any, filename: str) -> IniDocument:
    if src is None:
        return IniDocument()
    if not isinstance(src, dict):
        raise IniError(f'"{filename}" is not a mapping of sections.')
    ret = IniDocument()
    for sect, pairs in src.items():
        if pairs is None:
            pairs = {}
        if not isinstance(pairs, dict):
            raise IniError(
                f'Section "{sect}" in "{filename}" is not a mapping.')
        # may there be some pure digits considered as int
        ret[str(sect)] = {
            str(k): '' if v is None else str(v) for k, v in pairs.items()
        }
    return ret


class IniJsonParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _to_document(json.load(fp), self._fn)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False, indent=indent)


class IniYamlParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _to_document(yaml.safe_load(fp), self._fn)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        # keep the sorted order, instead of pyyaml's own sort.
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True, sort_keys=False, indent=indent)
