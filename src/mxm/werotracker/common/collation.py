"""
Locale-aware ordering for display names.

Bank names come from many European languages, so plain code-point ordering
would push every non-ASCII initial ("Ångström", "Øresund", "Łódź") behind
"Z". Names are compared with the Unicode Collation Algorithm (root/DUCET
ordering, as `Intl.Collator` uses without a locale), falling back to the exact
NFC spelling only when two names collate equal:

    >>> sorted(["Zeta Bank", "Øresund Bank", "Æble Bank"], key=collation_key)
    ['Æble Bank', 'Øresund Bank', 'Zeta Bank']
"""

from __future__ import annotations

import unicodedata

from pyuca import Collator

_COLLATOR = Collator()


def collation_key(text: str) -> tuple[tuple[int, ...], str]:
    return (tuple(_COLLATOR.sort_key(text)), unicodedata.normalize("NFC", text))


__all__ = ["collation_key"]
