"""Text folding shared by search storage and search queries."""
import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def fold_text(value: str) -> str:
    """
    Fold text for case- and accent-insensitive comparison.

    Decomposes to NFKD, drops combining marks, collapses whitespace and
    casefolds, so "  José  PÉREZ " becomes "jose perez".
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _WHITESPACE.sub(" ", stripped).strip().casefold()
