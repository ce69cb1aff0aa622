import json
from pathlib import Path

from classtiming import ScheduleSet, generate, validate_schedule
from classtiming.data.loader import load_schedule, schedule_from_dict, schedule_to_dict, write_schedule
from classtiming.models import Break, Period
from classtiming.validate.report import format_validation_report, write_validation_report


def test_generated_schedule_is_valid(make_params) -> None:
    report = validate_schedule(generate(make_params()), ("08:00", "15:00"))
    assert report["valid"] is True
    assert report["overlaps"] == []
    assert report["first_start"] == "08:00"
    assert report["last_end"] == "11:30"
    assert report["school_day_violations"] == []


def test_hand_edited_schedule_problems() -> None:
    s = ScheduleSet(
        periods=(
            Period("1", 1, "Period 1", "P1", "08:00", "08:45"),
            Period("2", 2, "Period 2", "P2", "08:30", "09:15"),
            Period("3", 3, "Period 3", "P3", "10:00", "09:30"),
        ),
        breaks=(Break("b", "Prayer", "", "07:30", "07:45", "prayer", 0),),
    )
    report = validate_schedule(s, ("08:00", "15:00"))
    assert report["valid"] is False
    assert report["order_violations"] == ["P3 10:00-09:30"]
    assert report["overlaps"] == ["P1 (08:00-08:45) x P2 (08:30-09:15)"]
    assert report["school_day_violations"] == ["Prayer 07:30-07:45"]
    text = format_validation_report(report)
    assert "valid: False" in text
    assert "overlaps: 1" in text


def test_empty_schedule_report(tmp_path: Path) -> None:
    report = validate_schedule(ScheduleSet.empty())
    assert report["empty_periods"] is True
    assert report["valid"] is True
    write_validation_report(report, tmp_path)
    assert json.loads((tmp_path / "validation.json").read_text(encoding="utf-8"))["period_count"] == 0


def test_schedule_json_uses_wire_keys(make_params, tmp_path: Path) -> None:
    s = generate(make_params())
    data = schedule_to_dict(s)
    assert set(data) == {"periods", "breaks"}
    assert data["periods"][0]["shortName"] == "P1"
    assert data["breaks"][0]["breakType"] == "lunch"
    assert data["breaks"][0]["afterPeriod"] == 2
    path = write_schedule(s, tmp_path / "schedule.json")
    assert load_schedule(path) == s


def test_schedule_from_partial_dict() -> None:
    s = schedule_from_dict({"periods": [{"name": "Period 1", "startTime": "08:00", "endTime": "08:45"}]})
    assert s.periods[0].period_number == 1
    assert s.periods[0].period_type == "regular"
    assert s.periods[0].label == "Period 1"
    assert s.breaks == ()


def test_unparseable_times_are_reported() -> None:
    s = ScheduleSet(
        periods=(
            Period("1", 1, "Period 1", "P1", "8:00", "08:45"),
            Period("2", 2, "Period 2", "P2", "08:45", "09:30"),
        ),
    )
    report = validate_schedule(s)
    assert report["format_violations"] == ["P1 8:00-08:45"]
    assert report["order_violations"] == []
    assert report["overlaps"] == []
    assert report["first_start"] == "08:45"
    assert report["valid"] is False
    assert "format_violations: 1" in format_validation_report(report)
