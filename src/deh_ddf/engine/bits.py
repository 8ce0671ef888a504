"""Bit-token parser for ``Bits`` style fields (``SOLID+SHOOTABLE|0x400``).

One parser serves the legacy, MBF21 and weapon MBF21 vocabularies; the
caller picks the mnemonic table.
"""

import re

from deh_ddf.engine.diagnostics import Diagnostics
from deh_ddf.models.flags import FlagName


# Same delimiters as Boom/MBF
_DELIMS = re.compile(r"[+|, \t\f\r]+")

# C "%i": hex, octal with a leading zero, or decimal
_C_INT = re.compile(r"0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*")


def parse_c_int(token: str) -> int | None:
    """Parse a whole token as a C integer literal, or return None."""
    if not _C_INT.fullmatch(token):
        return None
    if token[:2] in ("0x", "0X"):
        return int(token, 16)
    if token.startswith("0"):
        return int(token, 8)
    return int(token)


def parse_bits(table: tuple[FlagName, ...], text: str, diagnostics: Diagnostics) -> int:
    """OR together every token of ``text``.

    Tokens starting with a digit are numeric; anything else is looked up
    case-insensitively in ``table``. Unknown or unreadable tokens are
    warned about and skipped.
    """
    by_name = {entry.mnemonic.upper(): entry.bits for entry in table}
    result = 0
    for token in _DELIMS.split(text):
        if not token:
            continue
        if token[0].isdigit():
            value = parse_c_int(token)
            if value is None:
                diagnostics.warn("bits", "unreadable BITS value: %s", token)
            else:
                result |= value
            continue
        bits = by_name.get(token.upper())
        if bits is None:
            diagnostics.warn("bits", "unknown BITS mnemonic: %s", token)
            continue
        result |= int(bits)
    return result
