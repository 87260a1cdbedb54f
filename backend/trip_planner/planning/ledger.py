from __future__ import annotations

from typing import List

from trip_planner.core.errors import InvalidBudget
from trip_planner.models.domain import LedgerSnapshot, LineItem


class CostLedger:
    """Running cost of a trip, kept as labelled line items against a budget."""

    def __init__(self, budget: float) -> None:
        if not budget > 0:
            raise InvalidBudget(budget)
        self.budget = budget
        self.total_cost = 0.0
        self._line_items: List[LineItem] = []

    def add_cost(self, label: str, amount: float) -> LineItem:
        item = LineItem(label=label, amount=amount)
        self._line_items.append(item)
        self.total_cost += amount
        return item

    @property
    def remaining(self) -> float:
        return self.budget - self.total_cost

    @property
    def within_budget(self) -> bool:
        return self.total_cost <= self.budget

    @property
    def over_budget_by(self) -> float:
        return max(0.0, self.total_cost - self.budget)

    def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            budget=self.budget,
            total_cost=self.total_cost,
            remaining=self.remaining,
            within_budget=self.within_budget,
            over_budget_by=self.over_budget_by,
            line_items=tuple(self._line_items),
        )
