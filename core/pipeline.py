"""Usage report to SCP pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from core.aggregator.usage_filter import filter_usage, validate_threshold
from core.models import PolicyDocument, PolicyType, Report
from core.parser.report_reader import parse_report, read_source
from core.policy.builder import build_policy

Loader = Callable[[str | Path], bytes]
Writer = Callable[[PolicyDocument], None]


def run(report: Report, policy_type: PolicyType | str, threshold: int) -> PolicyDocument:
    """Filter the report's usage at ``threshold`` and build the matching SCP."""
    service = report.service_name
    filtered = filter_usage(threshold, policy_type, report.usage)
    return build_policy(policy_type, service, filtered)


def generate(
    source: str | Path,
    policy_type: PolicyType | str,
    threshold: int,
    *,
    loader: Loader = read_source,
    warn_on_extra: bool = True,
) -> PolicyDocument:
    """Load ``source`` through ``loader`` and run the pipeline on its first report.

    Policy type and threshold are checked before the loader is called.
    """
    policy_type = PolicyType.parse(policy_type)
    threshold = validate_threshold(threshold)
    report = parse_report(loader(source), warn_on_extra=warn_on_extra)
    return run(report, policy_type, threshold)


@dataclass(slots=True)
class ScpRun:
    """One invocation of the pipeline with its I/O collaborators."""

    source: str | Path
    policy_type: PolicyType | str
    threshold: int
    loader: Loader = read_source
    writer: Optional[Writer] = None
    warn_on_extra: bool = True

    document: Optional[PolicyDocument] = field(init=False, default=None)

    def execute(self) -> PolicyDocument:
        self.document = generate(
            self.source,
            self.policy_type,
            self.threshold,
            loader=self.loader,
            warn_on_extra=self.warn_on_extra,
        )
        if self.writer is not None:
            self.writer(self.document)
        return self.document


__all__ = ["Loader", "Writer", "ScpRun", "generate", "run"]
