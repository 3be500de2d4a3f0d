# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 00:40:22
# @Author : Kariko Lin

"""INI reading and writing.

Reading is a single pass, line by line, without lookahead:

    ```ini
    key = val       ; before any header: the default section.
    [section]       ; `[ section ]` works the same.
    key233 = val666
    // a comment   (only with ParseFlag.COMMENTS_SLASH or COMMENTS_ALL)
    # a comment    (only with ParseFlag.COMMENTS_HASH or COMMENTS_ALL)
    []              ; back to the default section.
    ```

Duplicated sections or keys are errors rather than silent overrides,
see `DuplicateSection` and `DuplicateKey`.
"""

import logging
from io import StringIO
from locale import getpreferredencoding
from os import PathLike
from typing import Iterable, TextIO
from warnings import warn

import chardet

from .abstract import FileHandler
from .consts import DEFAULT_SECTION, ParseFlag, SaveFlag
from .errors import DuplicateKey, DuplicateSection
from .model import IniDocument, IniSection
from .util import l_trim, r_trim, trim

logger = logging.getLogger(__name__)

_SLASH_COMMENTS = ParseFlag.COMMENTS_SLASH | ParseFlag.COMMENTS_ALL
_HASH_COMMENTS = ParseFlag.COMMENTS_HASH | ParseFlag.COMMENTS_ALL


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        parse_flags: ParseFlag = ParseFlag.NONE,
        save_flags: SaveFlag = SaveFlag.NONE
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self.parse_flags = parse_flags
        self.save_flags = save_flags

    @staticmethod
    def _strip_comments(line: str, flags: ParseFlag) -> str:
        if flags & _SLASH_COMMENTS:
            line = line.split('//', 1)[0]
        if flags & _HASH_COMMENTS:
            line = line.split('#', 1)[0]
        return line

    @staticmethod
    def _target(ins: IniDocument, section: str) -> IniSection:
        if section not in ins:
            ins[section] = {}
        return ins[section]

    @staticmethod
    def readstream(
        buf: Iterable[str],
        ins: IniDocument | None = None,
        flags: ParseFlag = ParseFlag.NONE
    ) -> IniDocument:
        """Read decoded lines (a text stream, or simply a list of str).

        Pairs before any header go to the current section of `ins`
        (the default section, for a new document).

        Raises `DuplicateSection` / `DuplicateKey` at the first collision.
        `ins` keeps whatever was read before that line.
        """
        if ins is None:
            ins = IniDocument()
        this_sect = IniParser._target(
            ins,
            DEFAULT_SECTION if ins.current_name is None
            else ins.current_name)
        lineno = 0
        for lineno, i in enumerate(buf, 1):
            i = trim(IniParser._strip_comments(i.rstrip('\r\n'), flags))
            if not i:
                continue
            if i[0] == '[':
                section = trim(i, '[] ')
                if not section:
                    this_sect = IniParser._target(ins, DEFAULT_SECTION)
                    continue
                if section in ins:
                    raise DuplicateSection(section, lineno)
                this_sect = IniParser._target(ins, section)
            elif '=' in i:
                key, val = i.split('=', 1)
                key = r_trim(key)
                if key in this_sect:
                    raise DuplicateKey(this_sect.name, key, lineno)
                this_sect[key] = l_trim(val)
        logger.debug('Read %d lines, %d sections in total.', lineno, len(ins))
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        encoding = codec['encoding']
        if encoding is None or codec['confidence'] < 0.8:
            encoding = 'utf-8'
        logger.debug('Decoding "%s" as %s.', filename, encoding)

        # fallbacks
        try:
            buf = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(
        self, ins: IniDocument | None = None,
        flags: ParseFlag | None = None
    ) -> IniDocument:
        """Read the file given at init, into `ins` if provided.

        May raise `OSError` if the file is not readable.
        """
        if flags is None:
            flags = self.parse_flags
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                buf = StringIO(fp.read())
        except UnicodeDecodeError:
            buf = self._decode_file(self._fn)
        return self.readstream(buf, ins, flags)

    @staticmethod
    def _check_pair(section: str, key: str) -> None:
        if '=' in key or key[:1] == '[':
            warn(
                f'Key "{key}" in [{section}] would not be read back '
                'as the same key.')

    @staticmethod
    def writestream(
        instance: IniDocument,
        fp: TextIO,
        flags: SaveFlag = SaveFlag.NONE
    ) -> None:
        """Serialize `instance` into a text stream.

        No validation here: the document already keeps names unique.
        The default section writes nothing (not even padding) when it
        has no pair to write.
        """
        prune = bool(flags & SaveFlag.PRUNE)
        for sect, data in instance.items():
            pairs = [(k, v) for k, v in data.items() if v or not prune]
            if prune and not pairs:
                continue
            if not sect and not pairs:
                continue  # nothing to write at all.

            if sect:
                if ']' in sect:
                    warn(f'Section name "{sect}" contains "]".')
                fp.write(
                    f'[ {sect} ]\n' if flags & SaveFlag.SPACE_SECTIONS
                    else f'[{sect}]\n')

            indent = '\t' if sect and flags & SaveFlag.TAB_KEYS else ''
            pairing = ' = ' if flags & SaveFlag.SPACE_KEYS else '='
            ending = ';\n' if flags & SaveFlag.SEMICOLON_KEYS else '\n'
            for key, val in pairs:
                IniParser._check_pair(sect, key)
                fp.write(f'{indent}{key}{pairing}{val}{ending}')

            if flags & SaveFlag.PADDING_SECTIONS:
                fp.write('\n')

    @staticmethod
    def dumps(
        instance: IniDocument, flags: SaveFlag = SaveFlag.NONE
    ) -> str:
        buf = StringIO()
        IniParser.writestream(instance, buf, flags)
        return buf.getvalue()

    def write(
        self, instance: IniDocument, flags: SaveFlag | None = None
    ) -> None:
        """Save to the file given at init (truncated first).

        The whole text is rendered and encoded before the file is touched,
        so a failure leaves the old file as it was.
        May raise `OSError` if the file is not writable,
        or `UnicodeEncodeError` if the encoding can't hold the text.
        """
        text = self.dumps(
            instance, self.save_flags if flags is None else flags)
        # what `open()` would use when encoding is None.
        text.encode(self._codec or getpreferredencoding(False))
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(text)
        logger.debug('Saved %d sections to "%s".', len(instance), self._fn)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'
