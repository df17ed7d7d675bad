from dataclasses import dataclass
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class Issue:
    severity: str
    code: str
    message: str
    path: str = "/"


def has_errors(issues: Iterable[Issue]) -> bool:
    return any(issue.severity == "error" for issue in issues)


def to_lines(issues: List[Issue]) -> List[str]:
    return [f"[{issue.severity.upper()}] {issue.code} {issue.path}: {issue.message}" for issue in issues]


def count_by_severity(issues: Iterable[Issue]) -> Dict[str, int]:
    counts = {"error": 0, "warn": 0}
    for issue in issues:
        counts[issue.severity] = counts.get(issue.severity, 0) + 1
    return counts


def summary_line(issues: Iterable[Issue]) -> str:
    counts = count_by_severity(issues)
    return f"Result: {counts['error']} error(s), {counts['warn']} warning(s)"
