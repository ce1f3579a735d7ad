from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Commit progress with tqdm (TTY only).

One bar per commit run. Every attempted row moves the bar by one and refreshes
the running success/failed postfix. Without a TTY (CI, pipes) no bar is created
and only the counters are kept.
"""

__all__ = [
    "CommitProgress",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class CommitProgress:
    """Row-level progress for the commit loop."""

    def __init__(self, total_rows: int, *, description: str = "Importing employees") -> None:
        self.total_rows = total_rows
        self.succeeded = 0
        self.failed = 0

        self.pbar: TqdmType[Any] | None = None
        if is_tty_enabled():
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                leave=True,
                ncols=80,
                ascii=True,
            )

    @property
    def attempted(self) -> int:
        return self.succeeded + self.failed

    def row_done(self, ok: bool) -> None:
        if ok:
            self.succeeded += 1
        else:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(success=self.succeeded, failed=self.failed)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> CommitProgress:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
