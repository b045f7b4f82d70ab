"""Link check result (UNO: single model)."""

from dataclasses import dataclass, field

from .CheckFinding import CheckFinding


@dataclass
class LinkCheckResult:
    """Broken and placeholder links found across a content directory."""

    broken: list[CheckFinding] = field(default_factory=list)
    placeholders: list[CheckFinding] = field(default_factory=list)
    files_checked: int = 0
