"""Warnings and fatal errors raised while applying edits or converting.

Warnings never stop a run: they are logged and kept on the session so the
caller can inspect them afterwards. ``ConversionError`` aborts the run.
"""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """A condition the converter cannot recover from."""


@dataclass(slots=True)
class ConversionWarning:
    category: str      # short tag, e.g. "field", "bits", "states"
    message: str

    def __str__(self) -> str:
        return f"[{self.category}] {self.message}"


class Diagnostics:
    """Collects warnings for one session."""

    __slots__ = ("warnings", "quiet")

    def __init__(self, quiet: bool = False):
        self.warnings: list[ConversionWarning] = []
        self.quiet = quiet

    def warn(self, category: str, fmt: str, *args) -> ConversionWarning:
        message = fmt % args if args else fmt
        warning = ConversionWarning(category, message)
        self.warnings.append(warning)
        if not self.quiet:
            logger.warning("%s", message)
        return warning

    def messages(self, category: str | None = None) -> list[str]:
        return [w.message for w in self.warnings
                if category is None or w.category == category]

    def __len__(self) -> int:
        return len(self.warnings)
