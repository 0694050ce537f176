from __future__ import annotations

import contextlib
import os
import sys
from pathlib import Path
from typing import IO, Iterator


class Logger:
    """Text output.

    filename: '-' for stdout, None for no output, a path or an open
    file object.
    """
    def __init__(self,
                 filename: str | Path | IO[str] | None = '-'):
        self.fd: IO[str]

        if filename is None:
            self.fd = open(os.devnull, 'w')
            self.close_fd = True
        elif filename == '-':
            self.fd = sys.stdout
            self.close_fd = False
        elif isinstance(filename, (str, Path)):
            self.fd = open(filename, 'w')
            self.close_fd = True
        else:
            self.fd = filename
            self.close_fd = False

        self.indentation = ''

    def __del__(self) -> None:
        self.close()

    def close(self) -> None:
        if self.close_fd and not self.fd.closed:
            self.fd.close()

    @contextlib.contextmanager
    def indent(self, text: str) -> Iterator[None]:
        self(text)
        self.indentation += '  '
        try:
            yield
        finally:
            self.indentation = self.indentation[2:]

    def __call__(self, *args, **kwargs) -> None:
        if self.fd.closed:
            return
        if kwargs:
            for kw, arg in kwargs.items():
                print(f'{self.indentation}{kw}: {arg}', file=self.fd)
        else:
            print(self.indentation, end='', file=self.fd)
            print(*args, file=self.fd)
        self.fd.flush()
