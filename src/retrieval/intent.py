"""
Intent labelling of staff questions for analytics.
"""

from __future__ import annotations

from typing import Dict, Tuple

GENERAL_INTENT = "general"

# Checked in order; the first intent with a trigger found in the query wins.
INTENT_TRIGGERS: Dict[str, Tuple[str, ...]] = {
    "deposit": ("deposit", "hold", "preauth", "security"),
    "late-return": ("late", "overdue", "grace period"),
    "fuel": ("fuel", "gas", "petrol", "diesel", "tank", "refuel"),
    "mileage": ("mileage", "km", "kilometre", "odometer"),
    "cross-border": ("cross-border", "border", "country", "international", "one-way"),
    "damage": ("damage", "scratch", "dent", "inspection"),
    "accident": ("accident", "crash", "collision", "emergency", "tow"),
    "insurance": ("insurance", "cdw", "protection", "waiver", "coverage"),
    "verification": ("verification", "id", "license", "licence", "passport", "age"),
    "availability": ("availability", "available", "fleet", "book"),
    "pricing": ("pricing", "discount", "rate", "coupon", "corporate"),
    "cancellation": ("cancel", "refund", "modify", "reschedule"),
    "no-show": ("no-show", "no show", "missed pickup"),
    "cleaning": ("cleaning", "dirty", "smoke", "pet", "stain"),
    "child-seat": ("child seat", "baby", "booster", "gps", "accessory"),
    "loyalty": ("loyalty", "points", "gold", "platinum", "member"),
    "macro": ("macro", "template", "calculator", "calculate"),
    "checklist": ("checklist", "inspection", "pickup checklist", "return checklist"),
}


def detect_intent(query: str) -> str:
    """Return the first matching intent label, or ``general``."""
    q = query.lower()
    for intent, triggers in INTENT_TRIGGERS.items():
        if any(t in q for t in triggers):
            return intent
    return GENERAL_INTENT
