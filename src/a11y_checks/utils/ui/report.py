"""
Rich rendering of violation lists.
"""

from collections import Counter
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...config.check_config import ItemLabel
from ...schemas.violation import Severity, Violation
from ...services.reporting import describe_element
from .theme import SEVERITY_STYLES, THEME

console = Console()


def render_violations(
    violations: Iterable[Violation], item_label: ItemLabel = ItemLabel.LABEL
) -> Table:
    """
    Build a table with one row per violation, in report order.

    Args:
        violations: Violations to show
        item_label: How to name elements

    Returns:
        Rich Table ready to print
    """
    table = Table(
        box=box.MINIMAL_DOUBLE_HEAD,
        header_style=f"bold {THEME['primary']}",
        border_style=THEME["border"],
        padding=(0, 1),
    )
    table.add_column("Severity", no_wrap=True)
    table.add_column("Rule", style=THEME["muted"], no_wrap=True)
    table.add_column("Message", style=THEME["fg"])
    table.add_column("Elements", style=THEME["secondary"])
    table.add_column("Reason", style=THEME["muted"])

    for violation in violations:
        severity = Text(
            violation.severity.heading, style=f"bold {SEVERITY_STYLES[violation.severity.value]}"
        )
        elements = "\n".join(describe_element(e, item_label) for e in violation.elements)
        table.add_row(
            severity,
            violation.rule or "",
            violation.message,
            elements,
            violation.reason or "",
        )

    return table


def summarize(violations: Iterable[Violation]) -> Text:
    """One-line count of failures and warnings."""
    counts = Counter(v.severity for v in violations)
    failures = counts.get(Severity.FAILURE, 0)
    warnings = counts.get(Severity.WARNING, 0)

    text = Text()
    if not failures and not warnings:
        text.append("✓ No accessibility issues found", style=f"bold {THEME['success']}")
        return text

    mark_style = THEME["error"] if failures else THEME["warning"]
    text.append("✗ " if failures else "! ", style=f"bold {mark_style}")
    text.append(f"{failures} failure(s)", style=THEME["error"] if failures else THEME["muted"])
    text.append(", ", style=THEME["muted"])
    text.append(f"{warnings} warning(s)", style=THEME["warning"] if warnings else THEME["muted"])
    return text


def print_violations(
    violations: Iterable[Violation],
    item_label: ItemLabel = ItemLabel.LABEL,
    out: Optional[Console] = None,
) -> None:
    """Print the violation table followed by the summary line."""
    out = out or console
    violations: List[Violation] = list(violations)

    if violations:
        out.print(render_violations(violations, item_label))
    out.print(summarize(violations))
