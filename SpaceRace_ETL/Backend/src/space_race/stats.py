from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from .aggregations import count_by, get_top_n
from .derivers import MissionRecord


def round_half_up(value: float, ndigits: int = 1) -> float:
    """Round like JavaScript's toFixed: exact binary value, halves go up."""
    return float(Decimal(value).quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP))


def success_counts(records: Sequence[MissionRecord], field: str) -> Dict[Hashable, Dict[str, int]]:
    buckets = {}
    for record in records:
        key = getattr(record, field)
        buckets.setdefault(key, {"success": 0, "total": 0})
        if record.success:
            buckets[key]["success"] += 1
        buckets[key]["total"] += 1
    return buckets


def success_rate_by(records: Sequence[MissionRecord], field: str, ndigits: int = 1) -> Dict[Hashable, float]:
    """Success percentage per value of ``field``, ordered by that value.

    Only keys that have at least one record exist, so no bucket divides by zero.
    """
    buckets = success_counts(records, field)
    return {
        key: round_half_up(v["success"] / v["total"] * 100, ndigits)
        for key, v in sorted(buckets.items())
    }


def moving_average(values: Sequence[float], window: int = 5, ndigits: int = 1) -> List[float]:
    """Centered moving average, narrowed at both ends of the series."""
    half = window // 2
    averaged = []
    for i in range(len(values)):
        chunk = values[max(0, i - half):min(len(values), i + half + 1)]
        averaged.append(round_half_up(sum(chunk) / len(chunk), ndigits))
    return averaged


def overall_success_rate(records: Sequence[MissionRecord]) -> float:
    if not records:
        return 0.0
    return sum(1 for r in records if r.success) / len(records) * 100


def year_range(records: Sequence[MissionRecord]) -> Optional[Tuple[int, int]]:
    if not records:
        return None
    years = [r.year for r in records]
    return min(years), max(years)


def _time_period(records: Sequence[MissionRecord]) -> str:
    span = year_range(records)
    return f"{span[0]} - {span[1]}" if span else "N/A"


def _top(records: Sequence[MissionRecord], field: str) -> Optional[Tuple[Hashable, int]]:
    top = get_top_n(count_by(records, field), 1)
    return top[0] if top else None


def summary_statistics(records: Sequence[MissionRecord]) -> Dict[str, Any]:
    """The four headline figures: missions, time period, countries, success rate."""
    return {
        "total_missions": len(records),
        "time_period": _time_period(records),
        "countries": len({r.country_full for r in records}),
        "success_rate": f"{round_half_up(overall_success_rate(records), 1):.1f}%",
    }


def insights(records: Sequence[MissionRecord]) -> Dict[str, Any]:
    successful = sum(1 for r in records if r.success)
    return {
        "total_missions": len(records),
        "time_period": _time_period(records),
        "countries": len({r.country_full for r in records}),
        "organizations": len({r.agency for r in records}),
        "top_country": _top(records, "country_full"),
        "top_agency": _top(records, "agency"),
        "top_rocket": _top(records, "rocket"),
        # two decimals here, one in summary_statistics
        "success_rate": f"{round_half_up(overall_success_rate(records), 2):.2f}",
        "successful_missions": successful,
        "failed_missions": len(records) - successful,
        "peak_year": _top(records, "year"),
        "top_month": _top(records, "month_name"),
        "top_day": _top(records, "day_of_week"),
    }
