# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:20:05
# @Author : Kariko Lin


class IniError(Exception):
    """Base of every error raised by this package."""
    pass


class DuplicateSection(IniError):
    def __init__(self, section: str, lineno: int | None = None) -> None:
        self.section = section
        self.lineno = lineno
        msg = f'Duplicate section [{section}]'
        if lineno is not None:
            msg += f' at line {lineno}'
        super().__init__(msg)


class DuplicateKey(IniError):
    def __init__(
        self, section: str, key: str, lineno: int | None = None
    ) -> None:
        self.section = section
        self.key = key
        self.lineno = lineno
        msg = f'Duplicate key "{key}" in [{section}]'
        if lineno is not None:
            msg += f' at line {lineno}'
        super().__init__(msg)


class NoSectionSelected(IniError, LookupError):
    """Unqualified access after the current section got removed."""
    def __init__(self) -> None:
        super().__init__(
            'No section selected. Call `select()` before accessing keys '
            'without a section name.')


class ConversionError(IniError, ValueError):
    def __init__(self, text: str, target: type) -> None:
        self.text = text
        self.target = target
        super().__init__(
            f'Cannot convert "{text}" to {getattr(target, "__name__", target)}')


class ConfigurationError(IniError):
    """Raised when a config mapping (or file) cannot be understood."""
    pass
