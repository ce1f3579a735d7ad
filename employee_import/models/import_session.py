from __future__ import annotations

from enum import Enum

from .parse_result import ParsedFile
from .processing_result import ImportOutcome

"""ImportSession and ImportStep: the per-upload lifecycle of one import.

State transitions: upload → preview → importing → complete

The only backward edge is preview → upload (``reset``), which drops the parsed
rows. Once ``importing`` starts it runs to ``complete`` over a fixed row list.
"""

__all__ = [
    "ImportStep",
    "ImportSession",
    "SessionStateError",
]


class SessionStateError(Exception):
    """Raised on a transition the lifecycle does not allow."""


class ImportStep(Enum):
    """Lifecycle step of an ImportSession.

    - UPLOAD: no file accepted yet (or the operator went back)
    - PREVIEW: file parsed and validated, waiting for the operator
    - IMPORTING: valid rows are being committed
    - COMPLETE: commit finished, outcome available
    """
    UPLOAD = "upload"
    PREVIEW = "preview"
    IMPORTING = "importing"
    COMPLETE = "complete"


class ImportSession:
    """Holds parsed rows during review and the outcome after commit."""

    def __init__(self) -> None:
        self.step = ImportStep.UPLOAD
        self.parsed: ParsedFile | None = None
        self.outcome: ImportOutcome | None = None

    def _require(self, *allowed: ImportStep) -> None:
        if self.step not in allowed:
            names = "|".join(s.value for s in allowed)
            raise SessionStateError(f"cannot leave step '{self.step.value}' (expected {names})")

    def load(self, parsed: ParsedFile) -> None:
        self._require(ImportStep.UPLOAD)
        self.parsed = parsed
        self.step = ImportStep.PREVIEW

    def reset(self) -> None:
        """Go back from review to upload, clearing all parsed state."""
        self._require(ImportStep.UPLOAD, ImportStep.PREVIEW)
        self.parsed = None
        self.outcome = None
        self.step = ImportStep.UPLOAD

    def loaded(self) -> ParsedFile:
        """Return the parsed file, or raise if no file has been loaded."""
        if self.parsed is None:
            raise SessionStateError(f"no file loaded (step '{self.step.value}')")
        return self.parsed

    def start_import(self) -> ParsedFile:
        self._require(ImportStep.PREVIEW)
        parsed = self.loaded()
        self.step = ImportStep.IMPORTING
        return parsed

    def complete(self, outcome: ImportOutcome) -> None:
        self._require(ImportStep.IMPORTING)
        self.outcome = outcome
        self.step = ImportStep.COMPLETE
