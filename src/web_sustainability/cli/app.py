# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for web-sustainability."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from web_sustainability import __version__
from web_sustainability.analysis.benchmarks import compare_to_benchmarks
from web_sustainability.analysis.equivalents import (
    environmental_equivalents,
    removable_code_kb,
    savings_tip,
)
from web_sustainability.data.loader import load_metrics
from web_sustainability.data.models import Grade, MetricsInput, SustainabilityResult
from web_sustainability.reporting.terminal import TerminalRenderer
from web_sustainability.scoring.engine import SustainabilityScorer
from web_sustainability.scoring.thresholds import score_to_grade


def metrics_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the metrics file argument and per-metric override options."""
    options = [
        click.argument("metrics_file", type=click.Path(), required=False),
        click.option("--url", type=str, default=None, help="Analyzed page URL"),
        click.option("--transfer-size", type=float, default=None, help="Transfer size in KB"),
        click.option("--http-requests", type=float, default=None, help="Number of HTTP requests"),
        click.option("--dom-elements", type=float, default=None, help="Number of DOM elements"),
        click.option(
            "--image-optimization", type=float, default=None,
            help="Fraction of optimized images (0-1)",
        ),
        click.option("--unused-css", type=float, default=None, help="Unused CSS in KB"),
        click.option("--unused-js", type=float, default=None, help="Unused JavaScript in KB"),
        click.option(
            "--can-save", type=float, default=None, help="Removable code in KB"
        ),
        click.option(
            "--performance", type=float, default=None, help="Performance score (0-100)"
        ),
        click.option(
            "--green/--grey", "green", default=None,
            help="Whether the site runs on green hosting",
        ),
        click.option("--co2", type=float, default=None, help="Grams of CO2 per visit"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_metrics(metrics_file: str | None, overrides: dict[str, Any]) -> MetricsInput:
    """Merge an optional metrics file with command-line overrides."""
    data: dict[str, Any] = {}
    if metrics_file:
        data = load_metrics(metrics_file).model_dump(exclude_none=True)

    top_level = {
        "url": overrides["url"],
        "transfer_size": overrides["transfer_size"],
        "http_requests": overrides["http_requests"],
        "dom_elements": overrides["dom_elements"],
        "performance_score": overrides["performance"],
        "co2_per_visit": overrides["co2"],
    }
    data.update({k: v for k, v in top_level.items() if v is not None})

    optimizations = {
        "image_optimization_score": overrides["image_optimization"],
        "unused_css": overrides["unused_css"],
        "unused_js": overrides["unused_js"],
        "can_save": overrides["can_save"],
    }
    optimizations = {k: v for k, v in optimizations.items() if v is not None}
    if optimizations:
        data["optimizations"] = {**data.get("optimizations", {}), **optimizations}

    if overrides["green"] is not None:
        data["green_hosting"] = {
            **data.get("green_hosting", {}), "is_green": overrides["green"]
        }

    return MetricsInput.model_validate(data)


def _load_or_exit(
    console: Console, metrics_file: str | None, overrides: dict[str, Any]
) -> MetricsInput:
    try:
        return _build_metrics(metrics_file, overrides)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
    except ValidationError as exc:
        console.print(
            f"[red]Invalid metrics: {exc.error_count()} field(s) failed validation[/]"
        )
        for err in exc.errors():
            loc = ".".join(str(part) for part in err["loc"])
            console.print(f"  [red]{escape(loc)}: {escape(err['msg'])}[/]")
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
    raise SystemExit(1)


def with_metrics(func: Callable[..., Any]) -> Callable[..., Any]:
    """Resolve the metrics options into a single ``metrics`` argument."""

    @metrics_options
    @click.pass_context
    @functools.wraps(func)
    def wrapper(ctx: click.Context, metrics_file: str | None, **kwargs: Any) -> Any:
        override_keys = (
            "url", "transfer_size", "http_requests", "dom_elements",
            "image_optimization", "unused_css", "unused_js", "can_save",
            "performance", "green", "co2",
        )
        overrides = {key: kwargs.pop(key) for key in override_keys}
        metrics = _load_or_exit(ctx.obj["console"], metrics_file, overrides)
        return ctx.invoke(func, metrics=metrics, **kwargs)

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """web-sustainability: Website Sustainability Scoring Tool

    Score a website's environmental footprint from page-analysis metrics:

    \b
      Data efficiency, resource count, media and code optimization,
      loading performance, user experience and green hosting.
    """
    ctx.ensure_object(dict)
    console = Console(no_color=no_color)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


@cli.command()
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export the result as JSON at this path",
)
@click.option("--show-details/--no-details", default=True, help="Show the factor breakdown")
@with_metrics
@click.pass_context
def score(
    ctx: click.Context,
    metrics: MetricsInput,
    export_json: str | None,
    show_details: bool,
) -> None:
    """Compute the sustainability score for a page.

    METRICS_FILE is an optional JSON or YAML file with the page metrics;
    individual options override values from the file.
    """
    console: Console = ctx.obj["console"]
    result = SustainabilityScorer().score(metrics)

    renderer = TerminalRenderer(console)
    renderer.render(result, metrics=metrics, show_details=show_details)

    if export_json:
        _export_json(result, export_json, console)


@cli.command()
@with_metrics
@click.pass_context
def benchmark(ctx: click.Context, metrics: MetricsInput) -> None:
    """Compare page size, CO2 and performance with industry averages."""
    console: Console = ctx.obj["console"]
    report = compare_to_benchmarks(metrics)
    equivalents = (
        environmental_equivalents(metrics.co2_per_visit) if metrics.co2_per_visit else []
    )
    tip = savings_tip(removable_code_kb(metrics.optimizations))
    renderer = TerminalRenderer(console)
    renderer.render_benchmarks(report, equivalents, tip, metrics=metrics)


@cli.command()
@click.argument("value", type=float)
@click.pass_context
def grade(ctx: click.Context, value: float) -> None:
    """Print the letter grade for a composite score VALUE (0-100)."""
    console: Console = ctx.obj["console"]
    letter = Grade(score_to_grade(value))
    console.print(f"{value:g} -> [{letter.color}]{letter.value}[/{letter.color}]")


def _export_json(result: SustainabilityResult, path: str, console: Console) -> None:
    """Export to JSON using the camelCase field names."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(result.model_dump_json(indent=2, by_alias=True))
    console.print(f"  [green]JSON report exported to:[/green] {path}")
