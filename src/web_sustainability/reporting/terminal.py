"""Rich terminal report renderer.

Composes Rich tables, panels, and gauges into the user-facing terminal
output for a sustainability score and its benchmark comparison.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from web_sustainability import __version__
from web_sustainability.data.models import (
    BenchmarkComparison,
    BenchmarkReport,
    EnvironmentalEquivalent,
    Factor,
    Improvement,
    MetricsInput,
    SustainabilityResult,
)
from web_sustainability.reporting.ascii_charts import mini_gauge, score_gauge
from web_sustainability.reporting.formatting import (
    format_co2,
    format_number,
    format_url_for_display,
)
from web_sustainability.scoring.weights import FACTOR_NAMES


def _area_name(area: str) -> str:
    try:
        return FACTOR_NAMES[Factor(area)]
    except ValueError:
        return area


class TerminalRenderer:
    """Renders sustainability results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(
        self,
        result: SustainabilityResult,
        metrics: MetricsInput | None = None,
        show_details: bool = True,
    ) -> None:
        """Render the full sustainability report to the terminal."""
        self._render_header(metrics)
        self._render_overall_score(result)
        if show_details:
            self._render_breakdown(result)
        self._render_improvements(result.insights.improvements)
        self._render_strengths(result)
        self._render_footer()

    def render_benchmarks(
        self,
        report: BenchmarkReport,
        equivalents: list[EnvironmentalEquivalent],
        savings_tip: str | None = None,
        metrics: MetricsInput | None = None,
    ) -> None:
        """Render the benchmark comparison and everyday CO2 equivalents."""
        self._render_header(metrics)

        self.console.print()
        self.console.print(Rule("[bold]BENCHMARKS[/bold]"))
        rows = [
            ("Page Size", report.page_size, " KB"),
            ("CO2 per Visit", report.co2, " g"),
            ("Performance", report.performance, "/100"),
        ]
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Metric", style="bold", min_width=14)
        table.add_column("Value", justify="right", min_width=10)
        table.add_column("Average", justify="right", min_width=10)
        table.add_column("Status", justify="center", min_width=9)
        table.add_column("Comparison", min_width=24)
        for label, comparison, unit in rows:
            if comparison is None:
                table.add_row(label, "[dim]n/a[/dim]", "", "", "[dim]not measured[/dim]")
                continue
            table.add_row(label, *self._comparison_cells(comparison, unit))
        self.console.print(table)

        if equivalents:
            self.console.print()
            self.console.print("  [bold]CO2 per visit is comparable to:[/bold]")
            for eq in equivalents:
                self.console.print(f"    [dim]•[/dim] {escape(eq.text)}")

        if savings_tip:
            self.console.print()
            self.console.print(
                Panel(escape(savings_tip), title="[bold]TIP[/bold]", border_style="yellow")
            )
        self._render_footer()

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    @staticmethod
    def _comparison_cells(comparison: BenchmarkComparison, unit: str) -> tuple[str, ...]:
        color = comparison.status.color
        return (
            f"{format_number(comparison.value)}{unit}",
            f"{format_number(comparison.average)}{unit}",
            f"[{color}]{comparison.status.value}[/{color}]",
            escape(comparison.message),
        )

    def _render_header(self, metrics: MetricsInput | None) -> None:
        header_text = Text()
        header_text.append("WEB SUSTAINABILITY", style="bold cyan")
        if metrics is not None:
            if metrics.url:
                header_text.append(" | ", style="dim")
                header_text.append(format_url_for_display(metrics.url), style="bold")
            if metrics.green_hosting and metrics.green_hosting.provider:
                header_text.append(" | ", style="dim")
                header_text.append(metrics.green_hosting.provider)
            if metrics.co2_per_visit:
                header_text.append(" | ", style="dim")
                header_text.append(f"{format_co2(metrics.co2_per_visit)} per visit")

        self.console.print()
        self.console.print(Panel(header_text, title="Sustainability Assessment"))

    def _render_overall_score(self, result: SustainabilityResult) -> None:
        gauge = score_gauge(result.sustainability_score, width=30)
        self.console.print()
        self.console.print(f"  [bold]SUSTAINABILITY SCORE[/bold]: {gauge}")
        self.console.print(f"  {escape(result.insights.assessment)}")

    def _render_breakdown(self, result: SustainabilityResult) -> None:
        """Render the per-factor breakdown table."""
        self.console.print()
        self.console.print(Rule("[bold]BREAKDOWN[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Factor", style="bold", min_width=18)
        table.add_column("Measured", min_width=20)
        table.add_column("Score", justify="center", min_width=15)
        table.add_column("Weight", justify="right", min_width=6)
        table.add_column("Status", justify="center", min_width=9)

        for key, factor in result.breakdown.items():
            color = factor.status.color
            table.add_row(
                _area_name(key),
                escape(factor.impact),
                mini_gauge(factor.score),
                f"{factor.weight:.0%}",
                f"[{color}]{factor.status.value}[/{color}]",
            )

        self.console.print(table)

    def _render_improvements(self, improvements: list[Improvement]) -> None:
        """Render the ordered improvements table."""
        self.console.print()
        self.console.print(Rule("[bold]IMPROVEMENTS[/bold]"))
        if not improvements:
            self.console.print("  [green]No improvements needed.[/green]")
            return

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Area", min_width=18)
        table.add_column("Suggestion", min_width=30)
        table.add_column("Impact", justify="center", width=8)

        for rank, imp in enumerate(improvements, start=1):
            impact_color = "red" if imp.impact.value == "high" else "yellow"
            table.add_row(
                str(rank),
                _area_name(imp.area),
                escape(imp.suggestion),
                f"[{impact_color}]{imp.impact.value}[/{impact_color}]",
            )

        self.console.print(table)

    def _render_strengths(self, result: SustainabilityResult) -> None:
        strengths = result.insights.strengths
        if not strengths:
            return
        self.console.print()
        self.console.print("  [bold]Strengths:[/bold]")
        for strength in strengths:
            self.console.print(
                f"    [green]•[/green] {_area_name(strength.area)}: "
                f"{escape(strength.description)}"
            )

    def _render_footer(self) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(f"  [dim]web-sustainability v{__version__}[/dim]")
        self.console.print()
