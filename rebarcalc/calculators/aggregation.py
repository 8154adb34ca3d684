"""
Aggregation — roll bar rows up into schedule totals.

Every function takes bar rows as produced by the bar calculators and reads
only their "calculated" result. Rows without one (not yet processed, or
failed) are skipped, never counted as zero-length bars.
All sums are order independent.
"""

from ..weights import is_standard_diameter
from .registry import get_shape, has_shape


def _results(rows):
    """(row, result) pairs for rows that carry a calculated result."""
    for row in rows:
        result = row.get("calculated")
        if result:
            yield row, result


def _group(rows, key: str) -> dict:
    groups = {}
    for row, result in _results(rows):
        bucket = groups.setdefault(row.get(key), {"bar_count": 0, "length_m": 0.0, "weight_kg": 0.0})
        bucket["bar_count"] += result["no_of_bars"]
        bucket["length_m"] += result["total_length"]
        bucket["weight_kg"] += result["total_weight"]
    return groups


def component_summary(component_id: str, component_name: str, rows: list) -> dict:
    """
    Totals over one component's bars.

    Returns:
        {"component_id", "component_name", "total_bars", "total_length_m", "total_weight_kg"}
    """
    total_bars = 0
    total_length = 0.0
    total_weight = 0.0
    for _, result in _results(rows):
        total_bars += result["no_of_bars"]
        total_length += result["total_length"]
        total_weight += result["total_weight"]

    return {
        "component_id": component_id,
        "component_name": component_name,
        "total_bars": total_bars,
        "total_length_m": total_length,
        "total_weight_kg": total_weight,
    }


def project_summary(components: list) -> dict:
    """
    Project steel summary, grouped by literal bar diameter.
    Bars of different shapes or components with the same diameter share a bucket.

    Args:
        components: dicts with a "bars" list of rows (calculate_component() output)

    Returns:
        {
            "by_diameter": {diameter: {"length_m", "weight_kg"}},
            "total_weight_kg": float,
            "total_weight_mt": float,
        }
    """
    rows = [row for component in components for row in component.get("bars", [])]
    return steel_summary(rows)


def steel_summary(rows: list) -> dict:
    """Same as project_summary() for a flat list of bar rows."""
    by_diameter = {}
    for diameter, bucket in _group(rows, "diameter").items():
        by_diameter[diameter] = {"length_m": bucket["length_m"], "weight_kg": bucket["weight_kg"]}

    total_weight = sum(bucket["weight_kg"] for bucket in by_diameter.values())
    return {
        "by_diameter": dict(sorted(by_diameter.items())),
        "total_weight_kg": total_weight,
        "total_weight_mt": total_weight / 1000.0,
    }


def summarize_by_diameter(rows: list) -> list:
    """[{"diameter", "bar_count", "total_length_m", "total_weight_kg", "is_standard"}] sorted by diameter."""
    return [
        {
            "diameter": diameter,
            "bar_count": bucket["bar_count"],
            "total_length_m": bucket["length_m"],
            "total_weight_kg": bucket["weight_kg"],
            "is_standard": is_standard_diameter(diameter),
        }
        for diameter, bucket in sorted(_group(rows, "diameter").items())
    ]


def summarize_by_shape(rows: list) -> list:
    """[{"shape_code", "shape_name", "bar_count", "total_length_m", "total_weight_kg"}] sorted by code."""
    summaries = []
    for code, bucket in sorted(_group(rows, "shape_code").items(), key=lambda item: str(item[0])):
        summaries.append({
            "shape_code": code,
            "shape_name": get_shape(code).NAME if has_shape(code) else code,
            "bar_count": bucket["bar_count"],
            "total_length_m": bucket["length_m"],
            "total_weight_kg": bucket["weight_kg"],
        })
    return summaries


def summarize_by_member(rows: list) -> list:
    """[{"member_type", "bar_count", "total_length_m", "total_weight_kg"}] sorted by member type."""
    return [
        {
            "member_type": member_type,
            "bar_count": bucket["bar_count"],
            "total_length_m": bucket["length_m"],
            "total_weight_kg": bucket["weight_kg"],
        }
        for member_type, bucket in sorted(_group(rows, "member_type").items(), key=lambda item: str(item[0]))
    ]


def grand_totals(rows: list) -> dict:
    """{"bar_count", "total_length_m", "total_weight_kg", "total_weight_mt"} over all rows."""
    bar_count = 0
    total_length = 0.0
    total_weight = 0.0
    for _, result in _results(rows):
        bar_count += result["no_of_bars"]
        total_length += result["total_length"]
        total_weight += result["total_weight"]
    return {
        "bar_count": bar_count,
        "total_length_m": total_length,
        "total_weight_kg": total_weight,
        "total_weight_mt": total_weight / 1000.0,
    }


def schedule_summary(rows: list) -> dict:
    """All shape-methodology summaries for one bar list."""
    return {
        "by_diameter": summarize_by_diameter(rows),
        "by_shape": summarize_by_shape(rows),
        "by_member": summarize_by_member(rows),
        "totals": grand_totals(rows),
    }
