"""Fixed-width helpers for the printed fields of a letter.

Widths are measured in display units: one character of text or one padding
token, whatever the token's own length (``&nbsp;`` counts as one).
"""

from __future__ import annotations

from typing import Any

NBSP = "&nbsp;"
EMPTY_PLACEHOLDER = "-"


def pad_fixed_length(text: str, lead: int, total: int, padding: str = NBSP) -> str:
    """Prefix ``lead`` padding units then right-pad up to ``total`` units.

    No right padding is added once ``lead + len(text)`` reaches ``total``.
    """

    text = str(text)
    lead = max(lead, 0)
    trail = max(total - len(text) - lead, 0)
    return padding * lead + text + padding * trail


def pad_center(text: str, total: int, padding: str = NBSP) -> str:
    """Center ``text`` in ``total`` units; odd remainders go to the right.

    ``text`` is returned unchanged when it is already ``total`` wide or wider.
    """

    text = str(text)
    diff = total - len(text)
    if diff <= 0:
        return text
    left = diff // 2
    return padding * left + text + padding * (diff - left)


def blank_if_empty(value: Any) -> Any:
    """Return ``"-"`` for ``None``, ``""`` and other falsy values.

    The string ``"0"`` is kept as is since it is a real field value.
    """

    return EMPTY_PLACEHOLDER if not value else value


def follow_case(fmt: str, text: str) -> str:
    """Give ``text`` the letter case of the placeholder ``fmt``.

    ``NAMA`` -> upper case, ``Nama`` -> first letter of each space separated
    word upper case, anything else -> lower.
    """

    text = str(text).lower()
    if len(fmt) >= 2 and fmt[0].isupper() and fmt[1].isupper():
        return text.upper()
    if fmt[:1].isupper():
        return " ".join(w[:1].upper() + w[1:] for w in text.split(" "))
    return text


__all__ = [
    "NBSP",
    "pad_fixed_length",
    "pad_center",
    "blank_if_empty",
    "follow_case",
]
