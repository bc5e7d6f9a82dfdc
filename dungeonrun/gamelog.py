"""In-memory game log that echoes every message to the console."""

from __future__ import annotations

import os
from collections.abc import Iterator

_LOG_HEADER = "\n===== 로그 내용 확인 ====="
_LOG_FOOTER = "=========================="


class GameLog:
    """Collects game messages, printing each one as it arrives."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    @property
    def messages(self) -> tuple[str, ...]:
        """All messages logged so far, oldest first."""
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._messages))

    def log(self, msg: str) -> None:
        """Record a message and print it."""
        self._messages.append(msg)
        print(msg)

    def save_to_file(self, filename: str | os.PathLike[str]) -> None:
        """Write every recorded message to a file, one per line."""
        with open(filename, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(f"{msg}\n" for msg in self._messages)

    def show_logs(self) -> None:
        """Print every recorded message between a header and a footer."""
        print(_LOG_HEADER)
        for msg in self._messages:
            print(msg)
        print(_LOG_FOOTER)


shared_log = GameLog()
"""Log used by game objects that are not given one of their own."""