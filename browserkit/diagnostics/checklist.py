"""Automated checks to highlight leaks and missing configuration."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from ..app import BrowserKit
from ..listeners import emitter_label


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(kit: BrowserKit) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []

    per_emitter = Counter(emitter_label(binding.emitter) for binding in kit.listeners.bindings())
    for label, count in sorted(per_emitter.items()):
        issues.append(
            ChecklistIssue(
                "warning",
                f"{count} listener(s) still registered on {label}; "
                "unregister them before discarding the emitter.",
            )
        )

    if kit.crypto is None:
        issues.append(
            ChecklistIssue("info", "Crypto key/iv not configured; encryption helpers are disabled.")
        )

    storage = kit.config.storage
    if storage.backend == "sqlalchemy" and not storage.dsn:
        issues.append(
            ChecklistIssue(
                "info",
                f"No storage DSN configured; falling back to {storage.resolve_dsn()}.",
            )
        )

    if kit.config.retry.max_attempts < 1:
        issues.append(ChecklistIssue("error", "Retry configuration 'max_attempts' must be positive."))
    if kit.config.retry.delay < 0:
        issues.append(ChecklistIssue("error", "Retry configuration 'delay' cannot be negative."))

    return issues
