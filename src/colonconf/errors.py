# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:06:31
# @Author : Kariko Lin

"""Error kinds and the `Result` pair.

The parser, the store and the loader never `raise` for a data problem.
They hand the error back instead, either alone (`ConfError | None`)
or packed in a `Result`, so that

    ```python
    val, err = conf.get_int('port')
    if err is not None:
        ...
    ```

reads the same everywhere. See `colonconf.raising` if you'd rather
get exceptions thrown at you.
"""

from typing import Any, NamedTuple


class ConfError(Exception):
    """Base of every error colonconf returns (or raises, in strict mode)."""
    pass


class ConfIOError(ConfError):
    """File could not be opened, read or decoded."""
    pass


class ConfSyntaxError(ConfError):
    """Malformed line in a config file."""

    def __init__(
        self, msg: str, lineno: int | None = None, line: str | None = None
    ) -> None:
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        if line is not None:
            msg += f' -> {line!r}'
        super().__init__(msg)


class ConfLookupError(ConfError, LookupError):
    """Missing key or section."""
    pass


class ConfTypeError(ConfError, TypeError):
    """Value doesn't coerce, or the target type isn't supported."""
    pass


class SchemaError(ConfError):
    """Target record misuse, like a frozen dataclass."""
    pass


class Result(NamedTuple):
    """`(value, error)` pair.

    `error` is `None` on success. On failure `value` is usually `None`,
    except for parsing, which hands back the partially filled `Conf`
    along with the error.
    """
    value: Any
    error: ConfError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Give `value` back, or raise `error`."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def fail(cls, error: ConfError) -> 'Result':
        return cls(None, error)
