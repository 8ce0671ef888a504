"""Collects DDF text into named output lumps.

Converters open a lump, append printf-style text to it and close it.
Lumps keep the order they were first opened in. Text is never re-read
once appended.
"""

from deh_ddf.engine.diagnostics import ConversionError


class LumpWriter:
    """Ordered ``{lump name: text}`` builder."""

    __slots__ = ("lumps", "_current", "_parts")

    def __init__(self):
        self.lumps: dict[str, str] = {}
        self._current: str | None = None
        self._parts: list[str] = []

    @property
    def current(self) -> str | None:
        return self._current

    def begin_lump(self, name: str) -> None:
        if self._current is not None:
            raise ConversionError(
                f"cannot open lump {name} while {self._current} is open"
            )
        self._current = name
        self._parts = []

    def write(self, text: str) -> None:
        if self._current is None:
            raise ConversionError("text written with no open lump")
        self._parts.append(text)

    def printf(self, fmt: str, *args) -> None:
        self.write(fmt % args if args else fmt)

    def finish_lump(self) -> None:
        if self._current is None:
            raise ConversionError("finish_lump called with no open lump")
        self.lumps[self._current] = self.lumps.get(self._current, "") + "".join(self._parts)
        self._current = None
        self._parts = []

    def text(self, name: str) -> str:
        return self.lumps.get(name, "")
