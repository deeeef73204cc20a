"""Key normalization and numeric coercion helpers."""

from __future__ import annotations

import math
import re
import unicodedata
from decimal import Decimal

_WHITESPACE_RE = re.compile(r"\s+")
_AMOUNT_NOISE_RE = re.compile(r"[\s$€]")
_GROUPED_RE = re.compile(r"[-+]?[1-9]\d{0,2}(?:[.,]\d{3})+")


def normalize_key(value: object) -> str:
    """Reduce a category name to its lookup key.

    Missing or non-string input yields ``""``.  Otherwise the value is
    trimmed, lower-cased, stripped of diacritics and has internal whitespace
    collapsed, so ``"  ÉLECTRICITÉ "`` and ``"electricite"`` compare equal.
    """
    if not isinstance(value, str):
        return ""
    decomposed = unicodedata.normalize("NFD", value.strip().lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE_RE.sub(" ", stripped)


def coerce_amount(value: object) -> float:
    """Coerce a loosely typed monetary amount to ``float``.

    Numbers pass through; strings such as ``"1 200,50 $"`` or
    ``"15.000,00 $"`` are parsed.  Anything else, including NaN and
    infinities, becomes ``0.0``.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(_canonical_number(_AMOUNT_NOISE_RE.sub("", value)))
        except ValueError:
            return 0.0
    else:
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def _canonical_number(text: str) -> str:
    """Rewrite *text* with ``.`` as the only decimal separator.

    With both ``,`` and ``.`` present, the last one is the decimal point.
    Otherwise a separator splitting the digits into groups of three after a
    non-zero lead of up to three digits (``"12,000"``, ``"1.234.567"``)
    separates thousands, and any other lone separator is the decimal point.
    """
    if "," in text and "." in text:
        decimal, grouping = (",", ".") if text.rfind(",") > text.rfind(".") else (".", ",")
        return text.replace(grouping, "").replace(decimal, ".")

    if _GROUPED_RE.fullmatch(text):
        return text.replace(",", "").replace(".", "")
    if text.count(",") == 1:
        return text.replace(",", ".")
    return text
