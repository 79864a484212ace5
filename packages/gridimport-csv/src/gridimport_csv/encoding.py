"""Best-effort recovery of text that is not valid in the default encoding.

Spreadsheet exports on some platforms write delimited text as 16-bit code
units.  :func:`read_utf16` pairs bytes into code units, decodes them, and
keeps only characters whose UTF-8 form is at most two bytes.  Garbled
output is preferred over aborting the import.
"""

from __future__ import annotations

_UTF16_BE_BOM = b"\xfe\xff"


def read_utf16(data: bytes) -> str | None:
    """Decode *data* as UTF-16, or return None when that is impossible.

    Byte order is little-endian unless the buffer starts with a big-endian
    byte order mark.  A little-endian mark decodes to U+FEFF, which the
    two-byte filter drops along with every other character above U+07FF.
    """
    if not data or len(data) % 2:
        return None

    codec = "utf-16-be" if data.startswith(_UTF16_BE_BOM) else "utf-16-le"
    try:
        text = data.decode(codec)
    except UnicodeDecodeError:
        return None

    return "".join(c for c in text if ord(c) < 0x800)
