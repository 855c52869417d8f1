"""Compose SCP documents from filtered usage."""

from __future__ import annotations

from typing import Mapping

from core.models import ActionStatement, PolicyDocument, PolicyType, action_name


class PolicyBuilder:
    """Turn selected event names of one service into a single-statement SCP."""

    def __init__(self, policy_type: PolicyType | str) -> None:
        self.policy_type = PolicyType.parse(policy_type)

    def build(self, service: str, filtered_usage: Mapping[str, int]) -> PolicyDocument:
        actions = sorted(action_name(service, event_name) for event_name in filtered_usage)
        statement = ActionStatement(effect=self.policy_type, actions=actions)
        return PolicyDocument(statement=statement)


def build_policy(policy_type: PolicyType | str, service: str, filtered_usage: Mapping[str, int]) -> PolicyDocument:
    return PolicyBuilder(policy_type).build(service, filtered_usage)


__all__ = ["PolicyBuilder", "build_policy"]
