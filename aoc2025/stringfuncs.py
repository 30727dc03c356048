"""Small string helpers used by the puzzle parsers."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def clean_split(text: str, pat: str) -> list[str]:
    """Split on ``pat`` and drop empty pieces."""
    return [piece for piece in text.split(pat) if piece]


def lstrip_parse(text: str, prefix: str) -> int:
    """Remove a required prefix and parse the rest as an integer."""
    if not text.startswith(prefix):
        raise ValueError(f"{text!r} does not start with {prefix!r}")
    return _parse_int(text[len(prefix):])


def rstrip_parse(text: str, suffix: str) -> int:
    """Remove a required suffix and parse the rest as an integer."""
    if not text.endswith(suffix):
        raise ValueError(f"{text!r} does not end with {suffix!r}")
    return _parse_int(text[: len(text) - len(suffix)])


def interval_split(text: str, interval: int) -> list[str]:
    """Cut ``text`` into chunks of ``interval`` characters, dropping a short tail."""
    if interval <= 0:
        raise ValueError("Zero interval in split")
    whole = len(text) - len(text) % interval
    return [text[start:start + interval] for start in range(0, whole, interval)]