"""Core domain models and services for the SCP generator."""

from .errors import InvalidPolicyType, InvalidThreshold, MalformedInput, MissingArgument, ScpGenError
from .models import ActionStatement, PolicyDocument, PolicyType, Report, UsageRecord, service_name

__all__ = [
    "ActionStatement",
    "InvalidPolicyType",
    "InvalidThreshold",
    "MalformedInput",
    "MissingArgument",
    "PolicyDocument",
    "PolicyType",
    "Report",
    "ScpGenError",
    "UsageRecord",
    "service_name",
]
