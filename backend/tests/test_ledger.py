from decimal import Decimal
from itertools import permutations
from types import SimpleNamespace

from events.ledger import sum_events


EVENTS = [
    {"value": 100, "type": "INCOME"},
    {"value": 40, "type": "OUTCOME"},
    {"value": 10, "type": "INCOME"},
]


class TestSumEvents:

    def test_empty_ledger_sums_to_zero(self):
        assert sum_events([]) == 0

    def test_income_minus_outcome(self):
        assert sum_events(EVENTS) == 70

    def test_order_does_not_change_the_sum(self):
        assert {sum_events(list(p)) for p in permutations(EVENTS)} == {Decimal("70")}

    def test_outcome_only_goes_negative(self):
        assert sum_events([{"value": 25, "type": "OUTCOME"}]) == -25

    def test_fractional_values_are_exact(self):
        events = [
            {"value": 0.1, "type": "INCOME"},
            {"value": 0.2, "type": "INCOME"},
        ]
        assert sum_events(events) == Decimal("0.3")

    def test_accepts_row_objects(self):
        rows = [
            SimpleNamespace(value=Decimal("12.50"), type="INCOME"),
            SimpleNamespace(value=Decimal("2.50"), type="OUTCOME"),
        ]
        assert sum_events(rows) == Decimal("10.00")
