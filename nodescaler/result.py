"""Reconcile results and combining them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class Result:
    """Outcome of a reconcile: whether and when to requeue."""

    requeue: bool = False
    requeue_after: timedelta = timedelta(0)

    def is_zero(self) -> bool:
        return not self.requeue and self.requeue_after == timedelta(0)


def min_result(*results: Result) -> Result:
    """Return the result that wants to requeue the soonest."""
    best = Result()
    minimum = timedelta.max
    for result in results:
        if result.is_zero():
            continue
        if result.requeue_after < minimum:
            minimum = result.requeue_after
            best = Result(requeue=True, requeue_after=minimum)
    return best