"""Data models shared across the pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from core.constants import ACTION_SEPARATOR, POLICY_VERSION, WILDCARD_RESOURCE
from core.errors import InvalidPolicyType


def service_name(event_source: str) -> str:
    """Return the service prefix of an event source, e.g. ``s3`` for ``s3.amazonaws.com``."""
    return event_source.split(".", 1)[0]


def action_name(service: str, event_name: str) -> str:
    return f"{service}{ACTION_SEPARATOR}{event_name}"


class PolicyType(str, Enum):
    """Effect of the generated statement."""

    ALLOW = "Allow"
    DENY = "Deny"

    @classmethod
    def parse(cls, value: object) -> "PolicyType":
        """Accept any casing of ``allow``/``deny`` and return the canonical member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        raise InvalidPolicyType(value)


class UsageRecord(BaseModel):
    """Call count for a single API action observed by the scanner."""

    event_name: str = Field(..., min_length=1, description="API action name, e.g. ListBuckets")
    count: int = Field(..., ge=0, strict=True, description="Number of calls in the report period")

    model_config = {"frozen": True}


class ScannerAccount(BaseModel):
    identifier: str = ""
    name: str = ""


class ScannerPartition(BaseModel):
    year: str = ""
    month: str = ""


class ScannerResults(BaseModel):
    event_source: str = Field(..., description="AWS service endpoint emitting the events")
    service_usage: list[UsageRecord] = Field(..., description="Per-action usage counts")

    model_config = {"frozen": True}

    @field_validator("event_source")
    @classmethod
    def require_service_prefix(cls, value: str) -> str:
        if not service_name(value):
            raise ValueError("event_source must name a service before the first '.'")
        return value


class Report(BaseModel):
    """One service usage report produced by the scanner."""

    account: Optional[ScannerAccount] = None
    description: Optional[str] = None
    partition: Optional[ScannerPartition] = None
    results: ScannerResults

    model_config = {"frozen": True}

    @property
    def service(self) -> str:
        return self.results.event_source

    @property
    def usage(self) -> list[UsageRecord]:
        return self.results.service_usage

    @property
    def service_name(self) -> str:
        """Short service prefix derived from the event source."""
        return service_name(self.results.event_source)


class ActionStatement(BaseModel):
    """Single SCP statement covering every selected action of one service."""

    effect: PolicyType = Field(..., alias="Effect")
    actions: list[str] = Field(default_factory=list, alias="Action")
    resource: Literal["*"] = Field(default=WILDCARD_RESOURCE, alias="Resource")

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "frozen": True,
    }


class PolicyDocument(BaseModel):
    """Service Control Policy document with a single statement."""

    version: Literal["2012-10-17"] = Field(default=POLICY_VERSION, alias="Version")
    statement: ActionStatement = Field(..., alias="Statement")

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "frozen": True,
    }

    @property
    def effect(self) -> str:
        return self.statement.effect

    @property
    def actions(self) -> list[str]:
        return self.statement.actions

    def to_json(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


__all__ = [
    "ActionStatement",
    "PolicyDocument",
    "PolicyType",
    "Report",
    "ScannerAccount",
    "ScannerPartition",
    "ScannerResults",
    "UsageRecord",
    "action_name",
    "service_name",
]
