# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:03:11
# @Author : Kariko Lin

"""
Basically INI structure: a group of sections, each a dict of raw text.

Both sections and keys iterate in *lexicographic order*,
so what you `get` is what `save()` writes, in the same order.
"""

from collections.abc import Iterator, Mapping, MutableMapping

from .consts import DEFAULT_SECTION
from .errors import DuplicateSection, NoSectionSelected


class IniSection(MutableMapping[str, str]):
    """... is a dict, just maintaining `key: value` pairs of a section.

    All pairs SHOULD be `str: str` (even if the value is empty).
    Values set via `self[key] = ...` are coerced with `str()`.
    """
    def __init__(
        self, name: str = DEFAULT_SECTION,
        pairs_to_import: Mapping[str, str] | None = None
    ) -> None:
        self._name = name
        self.__raw: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: object) -> None:
        self.__raw[key] = value if isinstance(value, str) else str(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__raw))

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def copy(self) -> 'IniSection':
        return IniSection(self._name, self.__raw)

    def to_dict(self) -> dict[str, str]:
        """Plain (ordered) dict snapshot of the pairs."""
        return {k: self.__raw[k] for k in self}


class IniDocument(MutableMapping[str, IniSection]):
    """... is simply a group of `IniSection`,
    representing a whole INI file (or buffer).

    The unnamed default section `""` exists from the very beginning,
    holding pairs that don't belong to any `[section]`.

    The document also tracks a *current section* by its name,
    which is what unqualified `lookup()` and `assign()` work on.
    """
    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}
        self._current: str | None = None
        self.create(DEFAULT_SECTION)

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        # never keep a ref to an external dict.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]
        if key == self._current:
            self._current = None

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__raw))

    def __repr__(self) -> str:
        return f'IniDocument({list(self)!r}, current={self._current!r})'

    @property
    def current_name(self) -> str | None:
        return self._current

    @property
    def current(self) -> IniSection:
        """The section pointed by the cursor.

        Raises `NoSectionSelected` after `remove()` or `clear()`.
        """
        if self._current is None or self._current not in self.__raw:
            raise NoSectionSelected()
        return self.__raw[self._current]

    def create(self, section: str) -> IniSection:
        """Add an empty section and select it.

        Raises `DuplicateSection` if a *named* section already exists;
        doing so on the default section just empties it.
        """
        if section and section in self.__raw:
            raise DuplicateSection(section)
        self.__raw[section] = IniSection(section)
        self._current = section
        return self.__raw[section]

    def select(self, section: str, no_create: bool = False) -> bool:
        """Point the cursor to `section`.

        Returns `True` if it already existed. Otherwise `False`,
        and (unless `no_create`) the section is created and selected.
        """
        if section not in self.__raw:
            if not no_create:
                self.create(section)
            return False
        self._current = section
        return True

    def remove(self, section: str) -> None:
        """Drop a whole section. The cursor gets unset anyway."""
        self.__raw.pop(section, None)
        self._current = None

    def clear(self) -> None:
        self.__raw.clear()
        self._current = None

    def lookup(
        self, key: str, default: str = '', section: str | None = None
    ) -> str:
        """Get a raw value or `default`. Absence is never an error."""
        if section is not None:
            self.select(section)
        return self.current.get(key, default)

    def assign(
        self, key: str, value: object, section: str | None = None
    ) -> None:
        """Insert or overwrite a pair (in `section`, created on demand)."""
        if section is not None:
            self.select(section)
        self.current[key] = value

    def copy(self) -> 'IniDocument':
        """Deep copy. No pairs dict is shared with `self`."""
        ret = IniDocument()
        ret.__raw.clear()
        for name, data in self.__raw.items():
            ret.__raw[name] = data.copy()
        ret._current = self._current
        return ret

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: self.__raw[name].to_dict() for name in self}
