"""Select scanner usage records against a call-count threshold."""

from __future__ import annotations

from typing import Callable, Iterable

from core.errors import InvalidThreshold
from core.models import PolicyType, UsageRecord

Predicate = Callable[[int, int], bool]


def at_or_above(count: int, threshold: int) -> bool:
    return count >= threshold


def below(count: int, threshold: int) -> bool:
    return count < threshold


# Allow keeps the boundary count, Deny drops it, so both sides partition the usage.
PREDICATES: dict[PolicyType, Predicate] = {
    PolicyType.ALLOW: at_or_above,
    PolicyType.DENY: below,
}


def validate_threshold(threshold: object) -> int:
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
        raise InvalidThreshold(threshold)
    return threshold


class UsageFilter:
    """Keep the usage records whose count satisfies the policy type's predicate."""

    def __init__(self, threshold: int, policy_type: PolicyType | str) -> None:
        self.threshold = validate_threshold(threshold)
        self.policy_type = PolicyType.parse(policy_type)
        self.predicate = PREDICATES[self.policy_type]

    def apply(self, usage: Iterable[UsageRecord]) -> dict[str, int]:
        selected: dict[str, int] = {}
        for record in usage:
            if self.predicate(record.count, self.threshold):
                selected[record.event_name] = record.count
            else:
                # a later duplicate below the cut must not leave an earlier one behind
                selected.pop(record.event_name, None)
        return selected


def filter_usage(threshold: int, policy_type: PolicyType | str, usage: Iterable[UsageRecord]) -> dict[str, int]:
    """Map event name to count for every record selected at ``threshold``."""
    return UsageFilter(threshold, policy_type).apply(usage)


__all__ = ["UsageFilter", "filter_usage", "validate_threshold", "at_or_above", "below", "PREDICATES"]
