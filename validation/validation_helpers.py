from typing import List
import logging
from dataclasses import dataclass

@dataclass(frozen=True)
class ValidationIssue:
    path: str
    code: str       # e.g., "DUPLICATE_ELEMENT_ID", "NON_FINITE_POSITION"
    severity: str   # "error" | "warning"
    message: str

def log_issues(issues: List[ValidationIssue], severity: str) -> bool:
    for issue in issues:
        (logging.error if issue.severity == severity else logging.warning)("%s: %s", issue.code, issue.message)
    return any(i.severity == severity for i in issues)
