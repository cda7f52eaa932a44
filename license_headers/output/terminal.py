"""Terminal output formatters using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_headers.models.rules import LicenseFamily, RuleSet
from license_headers.models.verdict import ReportVerdict


class RulesFormatter:
    """Display the license families the check recognises."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_rules(
        self,
        rules: RuleSet,
        default_matchers: tuple[LicenseFamily, ...] = (),
    ) -> None:
        """Format and display the rule set as a Rich table.

        Args:
            rules: Configured families and approved names.
            default_matchers: Built-in matchers, listed after the
                configured families when the rule set enables them.
        """
        table = Table(title="License Families")
        table.add_column("Category", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Patterns", justify="right")
        table.add_column("Approved", justify="center")
        table.add_column("Source", style="dim")

        for family in rules.families:
            self._add_row(table, rules, family, "configured")
        if rules.add_default_matchers:
            for family in default_matchers:
                self._add_row(table, rules, family, "built-in")

        self._console.print(table)

    def _add_row(
        self, table: Table, rules: RuleSet, family: LicenseFamily, source: str
    ) -> None:
        approved = (
            "[green]yes[/green]" if rules.is_approved(family) else "[red]no[/red]"
        )
        table.add_row(
            family.category.strip(),
            family.name,
            str(len(family.patterns)),
            approved,
            source,
        )


class VerdictFormatter:
    """Display the outcome of a license header check."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console if console is not None else Console()

    def format_verdict(self, verdict: ReportVerdict) -> None:
        """Display a status panel for the verdict.

        Args:
            verdict: The interpreted report.
        """
        if verdict.passed:
            status_color = "green"
            status = "PASS"
            message = "All scanned files carry approved license headers"
        else:
            status_color = "red"
            status = "FAILED"
            message = "License header problems were found"

        summary_lines = [
            f"Zero unknown licenses: {'yes' if verdict.zero_unknown_licenses else 'no'}",
            f"Files flagged: {'yes' if verdict.found_problems_with_files else 'no'}",
            f"Report: {escape(str(verdict.report_file))}",
            "",
            f"Status: [{status_color}]{status}[/{status_color}]",
            f"[{status_color}]{message}[/{status_color}]",
        ]
        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]LICENSE HEADERS[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
