from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable


def _field(event: Any, name: str):
    if isinstance(event, dict):
        return event[name]
    return getattr(event, name)


def sum_events(events: Iterable[Any]) -> Decimal:
    """
    Running total of a user's ledger: INCOME adds its value, OUTCOME
    subtracts it. Works on model rows or plain dicts; the order of
    `events` does not change the result.
    """
    total = Decimal("0")
    for event in events:
        value = Decimal(str(_field(event, "value")))
        if _field(event, "type") == "INCOME":
            total += value
        else:
            total -= value
    return total
