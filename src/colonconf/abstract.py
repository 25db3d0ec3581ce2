# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 20:58:40
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from io import StringIO
from logging import getLogger
from os import PathLike

import chardet

from .errors import ConfIOError, Result

logger = getLogger(__name__)


class FileHandler[T](metaclass=ABCMeta):
    """Something bound to a file path that reads it into a `T`.

    `read()` gives a `Result` rather than raising.
    """

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self) -> Result:
        raise NotImplementedError

    @staticmethod
    def _decode_file(filename: str | PathLike[str]) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('gbk')
        return StringIO(buf)

    def _open_text(self) -> Result:
        """Load the whole file as a text buffer.

        Tries `self._codec` (utf-8 if unset) first, then lets `chardet`
        guess.
        """
        codec = self._codec or 'utf-8'
        try:
            with open(self._fn, 'r', encoding=codec) as fp:
                return Result(StringIO(fp.read()))
        except UnicodeDecodeError:
            logger.warning(
                '%s is not %s encoded, guessing by chardet.', self._fn, codec)
        except (OSError, LookupError) as e:
            return Result.fail(ConfIOError(f'unable to read {self._fn}: {e}'))

        try:
            return Result(self._decode_file(self._fn))
        except (OSError, UnicodeDecodeError) as e:
            return Result.fail(
                ConfIOError(f'unable to decode {self._fn}: {e}'))

    def __str__(self) -> str:
        return str(self._fn)
