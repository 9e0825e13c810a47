"""Solving moves and the results file that stores them between runs."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType

RESULTS_FILE = "resultados.txt"
TEMP_FILE = "resultadosTmp.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def hanoi_moves(
    count: int, origin: int, target: int, auxiliary: int
) -> Iterator[tuple[int, int, int]]:
    """Yield ``(disc, from_rod, to_rod)`` for moving ``count`` discs from ``origin`` to ``target``.

    Disc 1 is the smallest.
    """
    if count < 0:
        raise ValueError(f"disc count must not be negative: {count}")
    if count == 0:
        return
    yield from hanoi_moves(count - 1, origin, auxiliary, target)
    yield count, origin, target
    yield from hanoi_moves(count - 1, auxiliary, target, origin)


def read_disc_count(path: str | os.PathLike[str]) -> int:
    """Disc count stored on the first line of a results file; 0 if it has none."""
    text = Path(path).read_text(encoding="utf-8")
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_moves(path: str | os.PathLike[str]) -> list[tuple[int, int]]:
    """The ``(disc, rod)`` pairs stored after the header of a results file.

    Reading stops at the first value that is not an integer.
    """
    tokens = Path(path).read_text(encoding="utf-8").split()
    values: list[int] = []
    for position, token in enumerate(tokens):
        try:
            value = int(token)
        except ValueError:
            break
        if position:
            values.append(value)
    return list(zip(values[::2], values[1::2]))


class ResultsRecorder:
    """Writes moves to a temporary file that replaces the results file on commit."""

    def __init__(self, count: int, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self.path = self.directory / RESULTS_FILE
        self.temp_path = self.directory / TEMP_FILE
        self._file = self.temp_path.open("w", encoding="utf-8")
        self._file.write(f"{count}\n")

    @property
    def closed(self) -> bool:
        return self._file is None

    def record(self, disc_id: int, rod_id: int) -> None:
        """Append one move: disc ``disc_id`` went to rod ``rod_id``."""
        if self._file is None:
            raise ValueError("results recorder is closed")
        self._file.write(f"{disc_id}\t{rod_id}\n")

    def commit(self) -> None:
        """Close the temporary file and make it the results file."""
        self._close()
        os.replace(self.temp_path, self.path)

    def discard(self) -> None:
        """Close and delete the temporary file, keeping any earlier results."""
        self._close()
        self.temp_path.unlink(missing_ok=True)

    def _close(self) -> None:
        if self._file is None:
            raise ValueError("results recorder is closed")
        self._file.close()
        self._file = None

    def __enter__(self) -> ResultsRecorder:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.closed:
            return
        if exc_type is None:
            self.commit()
        else:
            self.discard()