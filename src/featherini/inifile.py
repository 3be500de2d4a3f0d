# -*- encoding: utf-8 -*-
# @File   : inifile.py
# @Time   : 2024/11/03 16:02:18
# @Author : Kariko Lin

"""The `IniFile` facade: where the INI comes from, and what to do with it.

    ```python
    ini = IniFile('settings.ini', parse=True)
    port = ini.get_as('server', 'port', 8080)
    ini.set('server', 'host', 'localhost')
    ini.save(flags=SaveFlag.SPACE_KEYS | SaveFlag.PADDING_SECTIONS)
    ```

`get()`, `get_as()` and `set()` take an optional leading section name.
Without it, they work on the *current* section,
which is the one last selected by `create()`, `select()` or `ini[...]`.
"""

import logging
from dataclasses import dataclass
from io import StringIO
from os import PathLike, fspath
from typing import Any, Callable, Iterator

from .config import DEFAULT_CONFIG, IniConfig
from .consts import ParseFlag, SaveFlag, SourceKind
from .model import IniDocument, IniSection
from .parser import IniParser
from .util import convert_to

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IniSource:
    """Where an `IniFile` reads from. Fixed once the facade is built."""
    kind: SourceKind
    path: str | None = None
    text: str | None = None

    @classmethod
    def file(cls, path: str | PathLike[str]) -> 'IniSource':
        return cls(SourceKind.FILE, path=fspath(path))

    @classmethod
    def memory(cls, text: str = '') -> 'IniSource':
        return cls(SourceKind.MEMORY, text=text)

    def __str__(self) -> str:
        if self.kind is SourceKind.FILE:
            return str(self.path)
        return '<memory>'


class IniFile:
    def __init__(
        self,
        source: IniSource | str | PathLike[str],
        parse: bool = False,
        parse_flags: ParseFlag | None = None, *,
        config: IniConfig = DEFAULT_CONFIG
    ) -> None:
        """Bind an INI source. Nothing is read unless `parse` is set,
        in which case the result of `self.parse()` is not reported;
        call it explicitly if you need to know.
        """
        if not isinstance(source, IniSource):
            source = IniSource.file(source)
        self.__source = source
        self._config = config
        self._doc = IniDocument()
        if parse:
            self.parse(parse_flags)

    @classmethod
    def from_string(
        cls, text: str,
        parse: bool = True,
        parse_flags: ParseFlag | None = None, *,
        config: IniConfig = DEFAULT_CONFIG
    ) -> 'IniFile':
        """An in-memory INI. `save()` needs an explicit path then."""
        return cls(IniSource.memory(text), parse, parse_flags, config=config)

    @property
    def source(self) -> IniSource:
        return self.__source

    @property
    def config(self) -> IniConfig:
        return self._config

    @property
    def document(self) -> IniDocument:
        return self._doc

    @property
    def current(self) -> IniSection:
        return self._doc.current

    def clear(self) -> None:
        """Drop all sections, including the default one."""
        self._doc.clear()

    def parse(self, flags: ParseFlag | None = None) -> bool:
        """Read the source into the document.

        Returns `False` if the file is not readable.
        On `DuplicateSection` / `DuplicateKey` the error propagates
        and the document stays as it was before this call.
        """
        if flags is None:
            flags = self._config.parse_flags
        staged = self._doc.copy()
        if self.__source.kind is SourceKind.MEMORY:
            IniParser.readstream(
                StringIO(self.__source.text or ''), staged, flags)
        else:
            handler = IniParser(
                self.__source.path or '', self._config.encoding)
            try:
                handler.read(staged, flags)
            except OSError as e:
                logger.warning('Unable to read "%s": %s', handler, e)
                return False
        self._doc = staged
        return True

    def save(
        self,
        path: str | PathLike[str] | None = None,
        flags: SaveFlag | None = None
    ) -> bool:
        """Write (truncating) to `path`, or to the source file if omitted.

        Returns `False` if the target is not writable, if the encoding
        can't hold the text (the old file is kept then),
        or if there's no path at all (memory source).
        """
        target = fspath(path) if path else self.__source.path
        if not target:
            logger.warning(
                'Nowhere to save: source is %s and no path given.',
                self.__source)
            return False
        if flags is None:
            flags = self._config.save_flags
        handler = IniParser(target, self._config.encoding)
        try:
            handler.write(self._doc, flags)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning('Unable to write "%s": %s', target, e)
            return False
        return True

    def dumps(self, flags: SaveFlag | None = None) -> str:
        return IniParser.dumps(
            self._doc, self._config.save_flags if flags is None else flags)

    def create(self, section: str) -> IniSection:
        return self._doc.create(section)

    def select(self, section: str, no_create: bool = False) -> bool:
        return self._doc.select(section, no_create)

    def remove(self, section: str) -> None:
        self._doc.remove(section)

    def get(self, *args: str) -> str:
        """`get(key, default)` or `get(section, key, default)`.

        Returns the raw text, or `default` if the key is absent.
        The qualified form selects (or creates) the section first.
        """
        match args:
            case (key, default):
                return self._doc.lookup(key, default)
            case (section, key, default):
                return self._doc.lookup(key, default, section)
            case _:
                raise TypeError(
                    f'get() takes 2 or 3 arguments ({len(args)} given)')

    def get_as(
        self, *args: Any,
        converter: Callable[..., Any] | None = None,
        strict: bool | None = None
    ) -> Any:
        """`get_as(key, default)` or `get_as(section, key, default)`.

        The value is converted by `converter`, which is `type(default)`
        unless given (`str` if `default` is None). So
        `ini.get_as('server', 'port', 0)` gets an int.

        Absent key gives `default` as is. Malformed value gives
        the zero value of `converter` (`default` if it has none),
        or raises `ConversionError` if `strict`
        (which defaults to `config.strict_conversion`).
        """
        match args:
            case (key, default):
                section = None
            case (section, key, default):
                pass
            case _:
                raise TypeError(
                    f'get_as() takes 2 or 3 arguments ({len(args)} given)')
        if converter is None:
            converter = str if default is None else type(default)
        if strict is None:
            strict = self._config.strict_conversion

        if section is not None:
            self._doc.select(section)
        if key not in self._doc.current:
            return default
        ret = convert_to(self._doc.current[key], converter, strict=strict)
        # converter without a zero value, like `date.fromisoformat`.
        return default if ret is None else ret

    def set(self, *args: Any) -> None:
        """`set(key, value)` or `set(section, key, value)`.

        The qualified form selects (or creates) the section first.
        """
        match args:
            case (key, value):
                self._doc.assign(key, value)
            case (section, key, value):
                self._doc.assign(key, value, section)
            case _:
                raise TypeError(
                    f'set() takes 2 or 3 arguments ({len(args)} given)')

    def __getitem__(self, section: str) -> IniSection:
        """Select (or create) a section and get its live pairs."""
        self._doc.select(section)
        return self._doc.current

    def __contains__(self, section: object) -> bool:
        return section in self._doc

    def __iter__(self) -> Iterator[str]:
        return iter(self._doc)

    def __len__(self) -> int:
        return len(self._doc)

    def copy(self) -> 'IniFile':
        """A fully independent copy, sharing only source and config."""
        ret = IniFile(self.__source, config=self._config)
        ret._doc = self._doc.copy()
        return ret

    def __copy__(self) -> 'IniFile':
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> 'IniFile':
        return self.copy()

    def __repr__(self) -> str:
        return f'IniFile({self.__source}, sections={list(self._doc)!r})'
