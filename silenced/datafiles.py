"""Binary data files that begin with a fixed text header."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional, Union

# Bytes skipped before each header character, as formatted reads do.
_WHITESPACE = frozenset(b" \t\n\v\f\r")


class DataFile:
    """An open data file whose header has been checked.

    Whitespace before each header character is skipped. After construction
    ``stream`` is positioned just past the header.
    """

    def __init__(self, path: Union[str, Path], header: str) -> None:
        self.path = Path(path)
        self.header = header
        self.stream: BinaryIO = open(self.path, "rb")
        try:
            self._verify_header()
        except BaseException:
            self.stream.close()
            raise

    def _next_non_space(self) -> Optional[int]:
        while True:
            chunk = self.stream.read(1)
            if not chunk:
                return None
            if chunk[0] not in _WHITESPACE:
                return chunk[0]

    def _verify_header(self) -> None:
        for expected in self.header.encode("utf-8"):
            if self._next_non_space() != expected:
                raise ValueError(f"Invalid {self.header} file provided")

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> DataFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()