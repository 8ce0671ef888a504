"""Replaced text strings and cheats: the ``DDFLANG`` lump."""

from __future__ import annotations

from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.language import CHEATS, LANGUAGE_ENTRIES


LUMP_NAME = "DDFLANG"


def quote_ldf(text: str) -> str:
    """Quote ``text`` as an LDF string, breaking it at newlines."""
    parts = ['"']
    for ch in text:
        if ch == "\n":
            parts.append('\\n"\n  "')
        elif ch == '"':
            parts.append('\\"')
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


class LanguageConverter:
    """Writes the language lump for one session."""

    def __init__(self, session: ConversionSession, out: LumpWriter):
        self.session = session
        self.out = out
        self.got_one = False

    def begin_lump(self) -> None:
        self.out.begin_lump(LUMP_NAME)
        self.out.printf("<LANGUAGES>\n\n")
        self.out.printf("[ENGLISH]\n")

    def finish_lump(self) -> None:
        self.out.printf("\n")
        self.out.finish_lump()

    def write_string(self, ldf_name: str, text: str) -> None:
        if not self.got_one:
            self.got_one = True
            self.begin_lump()
        self.out.printf("%s = %s;\n", ldf_name, quote_ldf(text))

    def convert_all(self) -> None:
        session = self.session
        self.got_one = False

        # only replaced strings are known, even in all mode
        for idx in range(len(LANGUAGE_ENTRIES)):
            text = session.bex_strings.get(idx)
            if text is None:
                continue
            self.write_string(session.language_ldf_name(idx), text)

        if self.got_one:
            self.out.printf("\n")

        for idx, cheat in enumerate(CHEATS):
            text = session.cheats.get(idx)
            if text is None:
                if not session.config.all_mode:
                    continue
                text = cheat.orig_text
            self.write_string(cheat.ldf_name, text)

        if self.got_one:
            self.finish_lump()
