"""
Domain synonym table for car-rental staff questions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "deposit": ("hold", "preauth", "authorization", "block", "security deposit"),
    "late": ("overdue", "delayed", "past due"),
    "fuel": ("gas", "petrol", "diesel", "gasoline"),
    "damage": ("scratch", "dent", "broken", "cracked", "chipped"),
    "accident": ("crash", "collision", "wreck", "incident"),
    "insurance": ("coverage", "protection", "waiver", "cdw", "scdw"),
    "cancel": ("cancellation", "cancelled", "canceled"),
    "child": ("baby", "infant", "toddler", "kid", "booster"),
    "mileage": ("km", "kilometre", "kilometer", "odometer", "distance"),
    "price": ("pricing", "rate", "cost", "fee", "charge"),
    "discount": ("coupon", "promo", "offer", "deal"),
    "clean": ("cleaning", "dirty", "stain", "smoke", "smoking"),
    "border": ("cross-border", "international", "country", "abroad"),
    "return": ("drop-off", "dropoff", "bring back"),
    "book": ("booking", "reservation", "reserve"),
    "verify": ("verification", "identity", "document", "licence", "license"),
    "loyalty": ("rewards", "points", "member", "membership", "vip"),
})


def expand_with_synonyms(tokens: Iterable[str]) -> List[str]:
    """
    Expand tokens with their synonym clusters.

    A token that names a cluster adds its synonyms; a token that is itself a
    synonym adds the cluster key and every sibling. Result is deduplicated,
    original tokens first.
    """
    tokens = list(tokens)
    expanded = dict.fromkeys(tokens)
    for token in tokens:
        if token in SYNONYMS:
            expanded.update(dict.fromkeys(SYNONYMS[token]))
        for key, syns in SYNONYMS.items():
            if token in syns:
                expanded[key] = None
                expanded.update(dict.fromkeys(syns))
    return list(expanded)
