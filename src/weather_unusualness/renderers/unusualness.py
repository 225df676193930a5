"""Renderers for an analysis result.

Summary card, distribution chart (inline SVG strip plot), the full page,
and a plain-text report for the terminal.
"""

from __future__ import annotations

import math
import random
from datetime import datetime
from typing import TYPE_CHECKING, Any

from weather_unusualness.renderers import render_template
from weather_unusualness.schemas import TemperatureUnit

if TYPE_CHECKING:
    from weather_unusualness.analysis.unusualness import AnalysisResult
    from weather_unusualness.schemas import Location

# Vertical spread of historical points around the centre line
JITTER = 0.3


def rating_css_class(rating: str) -> str:
    """CSS class for a rating, e.g. ``rating-very-unusual``."""
    return "rating-" + rating.lower().replace(" ", "-")


def _details(result: AnalysisResult, unit: TemperatureUnit) -> list[dict[str, str]]:
    rows = [
        {"label": "Today's forecast high", "value": f"{result.today_high:.1f}{unit.symbol}"},
        {"label": "Historical average", "value": f"{result.mean:.1f}{unit.symbol}"},
        {"label": "Standard deviation", "value": f"{result.std_dev:.1f}{unit.symbol}"},
        {"label": "Z-score", "value": f"{result.z_score:+.2f}"},
        {"label": "Sample size", "value": str(result.sample_size)},
    ]
    if result.window is not None:
        rows.append({"label": "Date window", "value": str(result.window)})
    return rows


def build_summary_html(
    result: AnalysisResult,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> str:
    """Build the rating card: rating, explanation, details and warnings."""
    return render_template(
        "summary.html.j2",
        rating=str(result.rating),
        rating_class=rating_css_class(result.rating),
        explanation=result.explanation,
        details=_details(result, unit),
        warnings=result.warnings,
    )


def _axis_range(values: list[float]) -> tuple[float, float]:
    """Pad the data range and snap it outward to multiples of 5."""
    lo, hi = min(values), max(values)
    pad = max((hi - lo) * 0.05, 1.0)
    lo = math.floor((lo - pad) / 5) * 5
    hi = math.ceil((hi + pad) / 5) * 5
    return float(lo), float(hi)


def build_distribution_chart_html(
    result: AnalysisResult,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    *,
    seed: int = 0,
) -> str:
    """Build the distribution chart as inline SVG.

    Historical highs are drawn along the x axis with a small random
    vertical offset so overlapping values stay visible. Today's forecast
    sits on the centre line. Dashed lines mark the mean and ±1σ.

    Args:
        result: Analysis to plot.
        unit: Unit used for labels.
        seed: Seed for the jitter, so the same result renders identically.

    Returns:
        Rendered HTML string with inline SVG chart.
    """
    svg_width = 760
    svg_height = 260
    margin_left = 30
    margin_right = 30
    margin_top = 50  # Space for line labels
    margin_bottom = 50
    plot_right = svg_width - margin_right
    plot_bottom = svg_height - margin_bottom
    plot_width = plot_right - margin_left
    plot_height = plot_bottom - margin_top

    plus_one = result.mean + result.std_dev
    minus_one = result.mean - result.std_dev
    x_min, x_max = _axis_range([*result.sample, result.today_high, plus_one, minus_one])

    def x_for(temp: float) -> float:
        """Convert a temperature to SVG x coordinate."""
        return round(margin_left + (temp - x_min) / (x_max - x_min) * plot_width, 1)

    def y_for(offset: float) -> float:
        """Convert a vertical offset in [-1, 1] to SVG y coordinate (inverted)."""
        return round(plot_bottom - (offset + 1) / 2 * plot_height, 1)

    rng = random.Random(seed)
    points = [
        {
            "x": x_for(temp),
            "y": y_for(rng.uniform(-JITTER, JITTER)),
            "title": f"Historical high: {temp:.1f}{unit.symbol}",
        }
        for temp in result.sample
    ]
    today_point = {
        "x": x_for(result.today_high),
        "y": y_for(0),
        "title": f"Today's forecast high: {result.today_high:.1f}{unit.symbol}",
    }

    lines = [
        {
            "x": x_for(result.mean),
            "label": f"Avg: {result.mean:.1f}{unit.symbol}",
            "css": "chart-mean",
            "anchor": "middle",
        },
        {
            "x": x_for(plus_one),
            "label": f"+1σ: {plus_one:.1f}{unit.symbol}",
            "css": "chart-sigma",
            "anchor": "start",
        },
        {
            "x": x_for(minus_one),
            "label": f"-1σ: {minus_one:.1f}{unit.symbol}",
            "css": "chart-sigma",
            "anchor": "end",
        },
    ]

    step = 5 if x_max - x_min <= 60 else 10
    x_ticks = []
    tick = x_min
    while tick <= x_max:
        x_ticks.append({"x": x_for(tick), "label": f"{tick:.0f}"})
        tick += step

    return render_template(
        "distribution_chart.html.j2",
        svg_width=svg_width,
        svg_height=svg_height,
        margin_left=margin_left,
        margin_top=margin_top,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        points=points,
        today_point=today_point,
        lines=lines,
        x_ticks=x_ticks,
        axis_title=f"Temperature ({unit.symbol})",
        sample_size=result.sample_size,
    )


def build_page_html(
    result: AnalysisResult,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    location: Location | None = None,
    *,
    updated: datetime | None = None,
    history_years: int = 30,
) -> str:
    """Build the full HTML page for one analysis."""
    updated = updated or datetime.now()
    context: dict[str, Any] = {
        "updated": updated.strftime("%Y-%m-%d %H:%M"),
        "location": location.label if location else None,
        "history_years": history_years,
        "summary": build_summary_html(result, unit),
        "chart": build_distribution_chart_html(result, unit),
    }
    return render_template("base.html.j2", **context)


def format_text_report(
    result: AnalysisResult,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> str:
    """Plain-text report for the terminal."""
    lines = [result.rating.upper(), result.explanation, ""]
    width = max(len(row["label"]) for row in _details(result, unit))
    lines.extend(f"  {row['label']:<{width}}  {row['value']}" for row in _details(result, unit))
    lines.extend(f"Warning: {warning}" for warning in result.warnings)
    return "\n".join(lines)
