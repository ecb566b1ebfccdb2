from typing import Any, Dict, Hashable, Iterable, List, Sequence, Tuple


def count_by(records: Iterable[Any], field: str) -> Dict[Hashable, int]:
    """Count records per value of ``field``; falsy values count as "Unknown"."""
    counts: Dict[Hashable, int] = {}
    for record in records:
        value = getattr(record, field) or "Unknown"
        counts[value] = counts.get(value, 0) + 1
    return counts


def get_top_n(counts: Dict[Hashable, int], n: int = 15) -> List[Tuple[Hashable, int]]:
    # sorted() is stable, so ties keep first-seen order
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:n]


def group_by_multiple(records: Iterable[Any], fields: Sequence[str]) -> Dict[str, int]:
    groups: Dict[str, int] = {}
    for record in records:
        key = "|".join(str(getattr(record, f)) for f in fields)
        groups[key] = groups.get(key, 0) + 1
    return groups
