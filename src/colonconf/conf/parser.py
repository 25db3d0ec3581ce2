# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 00:12:46
# @Author : Kariko Lin

"""Line driven parser of the `key: value` format.

    ```
    # comments start with `#`
    StringItem: value
    IntItem: 1000
    [@IntArray]: 10 12 13
    [@FloatArray@,]: 1.5, 2, 3e2

    [Section1]
    int_val: 100
    ```

Global pairs must come first. Once a `[section]` header is met, every
pair below it belongs to that section (or a later one).
"""

from enum import Enum, auto
from io import StringIO, TextIOBase
from logging import getLogger
from os import PathLike
from typing import Iterator

from ..abstract import FileHandler
from ..errors import ConfSyntaxError, Result
from .consts import (
    COMMENT, COMPOSITE_LEFT, COMPOSITE_RIGHT,
    DEFAULT_ELEMENT_SEP, KV_SEP, SPACE_CHARS
)
from .keys import check_key
from .model import Conf

logger = getLogger(__name__)


class ParseState(Enum):
    START = auto()
    READING_KEY = auto()
    READING_VALUE = auto()
    HAVE_PAIR = auto()
    DONE = auto()
    ERROR = auto()


def _is_section_header(line: str) -> bool:
    # `[@arr]: [x]` starts with `[` and ends with `]` too,
    # but its first `]` is not the last char.
    return (
        line.startswith(COMPOSITE_LEFT)
        and line.find(COMPOSITE_RIGHT) == len(line) - 1)


class _LineMachine:
    """Walks `ParseState` over lines of a text buffer."""

    def __init__(self, buf: TextIOBase, ins: Conf) -> None:
        self._lines: Iterator[str] = iter(buf)
        self._conf = ins
        self.state = ParseState.START
        self.error: ConfSyntaxError | None = None
        self.lineno = 0
        self._line = ''
        self._key = ''
        self._val = ''

    def _fail(self, msg: str) -> None:
        self.error = ConfSyntaxError(msg, self.lineno, self._line)
        self.state = ParseState.ERROR

    def _start(self) -> None:
        try:
            raw = next(self._lines)
        except StopIteration:
            self.state = ParseState.DONE
            return
        self.lineno += 1
        self._line = line = raw.strip(SPACE_CHARS)

        if not line or line.startswith(COMMENT):
            return
        if _is_section_header(line):
            name = line[1:-1].strip(SPACE_CHARS)
            if not name:
                self._fail('empty section name')
            elif self._conf.has_section(name):
                self._fail(f'duplicate section [{name}]')
            else:
                self._conf._add_section(name)
                logger.debug('section [%s] at line %d', name, self.lineno)
            return
        self.state = ParseState.READING_KEY

    def _read_key(self) -> None:
        if KV_SEP not in self._line:
            # also covers a dangling key on the last line.
            self._fail(f'missing "{KV_SEP}" between key and value')
            return
        key, self._val = self._line.split(KV_SEP, 1)
        self._key = key.strip(SPACE_CHARS)
        if (reason := check_key(self._key)) is not None:
            self._fail(reason)
            return
        self.state = ParseState.READING_VALUE

    def _read_value(self) -> None:
        self._val = self._val.strip(SPACE_CHARS)
        if not self._val:
            self._fail(f'empty value of key "{self._key}"')
            return
        self.state = ParseState.HAVE_PAIR

    def _commit(self) -> None:
        self._conf._add_item(self._key, self._val, self.lineno)
        self.state = ParseState.START

    def run(self) -> ConfSyntaxError | None:
        steps = {
            ParseState.START: self._start,
            ParseState.READING_KEY: self._read_key,
            ParseState.READING_VALUE: self._read_value,
            ParseState.HAVE_PAIR: self._commit,
        }
        while self.state not in (ParseState.DONE, ParseState.ERROR):
            steps[self.state]()
        return self.error


class ConfParser(FileHandler[Conf]):
    """Parse a config file into a `Conf`.

    Failing at some line, you still get the partially filled `Conf`
    back in `Result.value`. Don't trust it; throw it away.
    """

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None,
        *, element_sep: str = DEFAULT_ELEMENT_SEP
    ) -> None:
        super().__init__(filename, encoding)
        self._sep = element_sep

    @staticmethod
    def readstream(buf: TextIOBase, ins: Conf | None = None) -> Result:
        """Parse an already decoded text stream.

        Feed `ins` to pick the element separator yourself,
        otherwise a default `Conf` is created.
        """
        if ins is None:
            ins = Conf()
        machine = _LineMachine(buf, ins)
        err = machine.run()
        # the machine leaves the cursor at the last header.
        ins.set_global_section()
        if err is not None:
            logger.debug('parse stopped: %s', err)
            return Result(ins, err)
        logger.debug(
            'parsed %d lines, %d global items, %d sections',
            machine.lineno, len(ins.header), len(ins.section_names()))
        return Result(ins)

    def read(self) -> Result:
        buf, err = self._open_text()
        if err is not None:
            return Result.fail(err)
        return self.readstream(buf, Conf(element_sep=self._sep))

    def __str__(self) -> str:
        return 'conf file: ' + super().__str__() + f'({self._codec})'


def loads(text: str, *, element_sep: str = DEFAULT_ELEMENT_SEP) -> Result:
    """Parse config text held in memory."""
    return ConfParser.readstream(
        StringIO(text), Conf(element_sep=element_sep))
