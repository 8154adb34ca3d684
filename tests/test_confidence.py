"""
Confidence scorer tests.

Tests:
1-3. Score bounds and levels
4-6. Individual factors
7.   Evaluation order does not change the score
8-9. Data source block
"""

from datetime import datetime, timedelta, timezone

import pytest

from rebarcalc.calculators import confidence
from rebarcalc.calculators.confidence import confidence_level, score_confidence
from rebarcalc.calculators.shapes import UnknownShape
from rebarcalc.profiles import ProjectConfig, get_profile, resolve_profile
from rebarcalc.schemas import BarEntry

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


def _bar(shape_code="S1", diameter=12, dims=None):
    return BarEntry(id="bar-1", shape_code=shape_code, diameter=diameter,
                    dimensions=dims if dims is not None else {"A": 3000})


def _names(result):
    return {f["factor"] for f in result["factors"]}


def test_score_clamps_to_100(is456):
    """50 + 25 + 10 + 15 + 5 + 5 = 110 → 100."""
    recent = is456.model_copy(update={"updated_at": NOW - timedelta(days=1)})
    result = score_confidence(_bar(), recent, now=NOW)
    assert result["score"] == 100
    assert result["level"] == "high"
    assert "Recent Configuration" in _names(result)


def test_score_clamps_to_0():
    """No profile, complex shape, missing B, 14 mm: 50 - 15 - 10 - 20 - 10 → 0."""
    result = score_confidence(_bar("S3", 14, {"A": 300}), None, now=NOW)
    assert result["score"] == 0
    assert result["level"] == "low"


def test_custom_profile_medium():
    """50 + 0 (custom) + 15 + 5, U-bar adds nothing for complexity."""
    result = score_confidence(_bar("S2", 10, {"A": 1000, "B": 200}), get_profile("CUSTOM"), now=NOW)
    assert result["score"] == 70
    assert result["level"] == "medium"


def test_levels():
    assert confidence_level(80) == "high"
    assert confidence_level(79) == "medium"
    assert confidence_level(60) == "medium"
    assert confidence_level(59) == "low"


def test_missing_dimensions_fixed_weight(is456):
    result = score_confidence(_bar("S4", 12, {"A": 1000}), is456, now=NOW)
    missing = [f for f in result["factors"] if f["factor"] == "Missing Dimensions"][0]
    assert missing["weight"] == -20
    assert missing["impact"] == "negative"
    assert missing["description"] == "2 dimensions missing or zero (B, C)"


def test_bound_config_updated_yesterday_clamps_to_100():
    config = ProjectConfig(code_profile_id="IS456", updated_at=NOW - timedelta(days=1))
    result = score_confidence(_bar(), resolve_profile(config), now=NOW)
    assert result["score"] == 100
    assert "Recent Configuration" in _names(result)


def test_recent_bound_config_earns_recency_bonus():
    """14 mm, A missing: 50 + 25 + 10 - 20 - 10 + 5 = 60."""
    config = ProjectConfig(code_profile_id="IS456", updated_at=NOW - timedelta(days=1))
    result = score_confidence(_bar("S1", 14, {"A": 0}), resolve_profile(config), now=NOW)
    assert result["score"] == 60
    assert result["level"] == "medium"


def test_stale_bound_config_gets_no_recency_bonus():
    config = ProjectConfig(code_profile_id="BS8110", updated_at=NOW - timedelta(days=45))
    assert "Recent Configuration" not in _names(score_confidence(_bar(), resolve_profile(config), now=NOW))


def test_manual_configuration_gets_no_recency_bonus():
    config = ProjectConfig(updated_at=NOW - timedelta(days=1))
    result = score_confidence(_bar(), resolve_profile(config), now=NOW)
    # 50 - 15 + 10 + 15 + 5
    assert result["score"] == 65
    assert result["data_source"]["profile_source"] == "manual"
    assert "Recent Configuration" not in _names(result)


def test_evaluation_order_does_not_matter(is456, monkeypatch):
    bar = _bar("S3", 8, {"A": 300})
    forward = score_confidence(bar, is456, now=NOW)
    monkeypatch.setattr(confidence, "FACTOR_EVALUATORS", tuple(reversed(confidence.FACTOR_EVALUATORS)))
    backward = score_confidence(bar, is456, now=NOW)
    assert forward["score"] == backward["score"]
    assert _names(forward) == _names(backward)


def test_data_source_parameters(is456):
    result = score_confidence(_bar("S3", 8, {"A": 300, "B": 200}), is456, now=NOW)
    source = result["data_source"]
    assert source["profile_id"] == "IS456"
    assert source["profile_name"] == "IS 456:2000"
    assert source["parameters_used"] == [
        "Diameter: 8mm",
        "90° deduction: 2d",
        "135° deduction: 3d",
        "Hook multiplier: 9d",
    ]


def test_unknown_shape_raises(is456):
    with pytest.raises(UnknownShape):
        score_confidence(_bar("S9"), is456, now=NOW)
