import os
from typing import Any, Dict, List, Optional, Tuple

from .utils import write_text_file


HISTORICAL_CONTEXT = [
    "The Space Race era (1950s-1970s) marked rapid growth in space exploration",
    "Success rates have generally improved with advancing technology",
    "Commercial spaceflight has emerged as a major force in recent decades",
    "The journey from Sputnik to modern space exploration continues!",
]


def _fmt_top(entry: Optional[Tuple[Any, int]], unit: str) -> str:
    if not entry:
        return "n/a"
    label, count = entry
    return f"{label} ({count:,} {unit})"


def _section(title: str, items: List[str]) -> List[str]:
    return [f"### {title}", ""] + [f"- {item}" for item in items] + [""]


def render_insights(insights: Dict[str, Any]) -> str:
    """Render the insights payload from stats.insights() as markdown."""
    lines = ["## Space Race Insights", ""]

    lines += _section("📊 Dataset Overview", [
        f"**Total Missions Analyzed:** {insights['total_missions']:,}",
        f"**Time Period:** {insights['time_period']}",
        f"**Countries Represented:** {insights['countries']}",
        f"**Organizations:** {insights['organizations']}",
    ])
    lines += _section("🏆 Top Performers", [
        f"**Leading Country:** {_fmt_top(insights['top_country'], 'missions')}",
        f"**Most Active Organization:** {_fmt_top(insights['top_agency'], 'missions')}",
        f"**Most Used Rocket:** {_fmt_top(insights['top_rocket'], 'launches')}",
    ])
    lines += _section("✅ Mission Success", [
        f"**Overall Success Rate:** {insights['success_rate']}%",
        f"**Successful Missions:** {insights['successful_missions']:,}",
        f"**Failed Missions:** {insights['failed_missions']:,}",
    ])
    lines += _section("📅 Launch Patterns", [
        f"**Peak Launch Year:** {_fmt_top(insights['peak_year'], 'missions')}",
        f"**Most Popular Launch Month:** {_fmt_top(insights['top_month'], 'launches')}",
        f"**Busiest Day of Week:** {_fmt_top(insights['top_day'], 'launches')}",
    ])
    lines += _section("🚀 Historical Context", HISTORICAL_CONTEXT)

    return "\n".join(lines).rstrip() + "\n"


def write_insights(insights: Dict[str, Any], output_dir: str) -> str:
    out_path = os.path.join(output_dir, "out", "insights.md")
    write_text_file(out_path, render_insights(insights))
    return out_path
