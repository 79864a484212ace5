"""Fractional ordering keys for sheets.

A key requested between two neighbours (or at an open end) always sorts
strictly between them under plain string comparison, so a new sheet can be
placed anywhere without renumbering its siblings.  Key generation is
delegated to the ``fractional-indexing`` package.
"""

from __future__ import annotations

from fractional_indexing import generate_key_between


def key_between(before: str | None, after: str | None) -> str:
    """Return a key that sorts strictly between *before* and *after*.

    Either side may be None to mean "open end".

    Raises
    ------
    ValueError
        If *before* does not sort strictly before *after*.
    """
    if before is not None and after is not None and before >= after:
        raise ValueError(f"ordering key {before!r} must sort before {after!r}")
    return generate_key_between(before, after)


def first_key() -> str:
    """Key for the first sheet of an empty document."""
    return key_between(None, None)


def key_after(key: str) -> str:
    return key_between(key, None)
