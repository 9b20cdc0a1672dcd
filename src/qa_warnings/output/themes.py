"""Severity color maps."""

from qa_warnings.models.warning import Severity

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.INFO: "blue",
    Severity.WARNING: "yellow",
    Severity.IMPORTANT: "red",
    Severity.CRITICAL: "red bold reverse",
}

SEVERITY_ICONS: dict[Severity, str] = {
    Severity.INFO: "i",
    Severity.WARNING: "!",
    Severity.IMPORTANT: "!!",
    Severity.CRITICAL: "X",
}


def styled_severity(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    return f"[{color}]{severity.value}[/{color}]"


def severity_icon(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    icon = SEVERITY_ICONS.get(severity, "?")
    return f"[{color}]{icon}[/{color}]"
