"""Tests for console output, JSON persistence and figure export."""

import json

import pytest

from fuzzy_handover.models import DecisionResult
from fuzzy_handover.reporters import (
    format_decision,
    format_fis_summary,
    print_results,
    save_figures,
)
from fuzzy_handover.utils import load_json, save_json


def test_format_decision():
    triggered = DecisionResult("fuzzy", True, 270, 27.0, 540.0)
    assert format_decision("Fuzzy", triggered) == "Fuzzy HO:       t = 27.00 s, x = 540.0 m"
    never = DecisionResult.never_triggered("threshold", drop_before=False)
    assert format_decision("Threshold", never) == "Threshold HO:   never triggered."


def test_print_results(reference_result, capsys):
    print_results(reference_result)
    out = capsys.readouterr().out
    assert "User speed: 72.0 km/h" in out
    assert "Fuzzy HO:" in out
    assert "Threshold HO:" in out
    assert "Fuzzy scheme - any drop before HO on BS1?  1" in out
    assert "Fuzzy HO lag vs threshold HO: +" in out


def test_fis_summary(fis):
    summary = format_fis_summary(fis)
    assert summary.splitlines()[0] == "FIS: HandoverDecision"
    assert "RSSdiff [-20, 20]: VeryNegative, Negative, Zero, Positive, VeryPositive" in summary
    assert "Rules (7):" in summary


def test_results_round_trip_through_json(reference_result, tmp_path):
    path = tmp_path / "nested" / "results.json"
    save_json(reference_result.to_dict(), path)

    data = load_json(path)
    assert data["decisions"]["fuzzy"] == reference_result.fuzzy.to_dict()
    assert data["series"]["time"][-1] == pytest.approx(60.0)


def test_load_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / "absent.json")


def test_load_json_invalid(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_json(path)


def test_save_figures(reference_result, fis, tmp_path):
    directory = tmp_path / "figures"
    paths = save_figures(reference_result, fis, directory)

    assert [p.name for p in paths] == [
        "fig_mf_inputs.png",
        "fig_mf_output.png",
        "fig_rss_vs_time.png",
        "fig_rssdiff_urgency.png",
        "fig_position.png",
    ]
    for path in paths:
        assert path.exists()
        assert path.stat().st_size > 0
