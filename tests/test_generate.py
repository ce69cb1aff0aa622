from itertools import combinations

import pytest

from classtiming import FormatError, ValidationError, generate, overlaps
from classtiming.data.loader import load_config


def _spans(items) -> list[tuple[str, str]]:
    return [(x.start_time, x.end_time) for x in items]


def test_four_period_day_with_lunch(make_params) -> None:
    s = generate(make_params())
    assert _spans(s.periods) == [
        ("08:00", "08:45"),
        ("08:45", "09:30"),
        ("10:00", "10:45"),
        ("10:45", "11:30"),
    ]
    assert [p.short_name for p in s.periods] == ["P1", "P2", "P3", "P4"]
    assert len(s.breaks) == 1
    lunch = s.breaks[0]
    assert (lunch.start_time, lunch.end_time) == ("09:30", "10:00")
    assert lunch.break_type == "lunch"
    assert lunch.after_period == 2


def test_generated_set_never_overlaps(make_params) -> None:
    s = generate(make_params(periods_count=8, short_break_after=frozenset({1, 3, 6}), lunch_after_period=5))
    for a, b in combinations(s.intervals(), 2):
        assert not overlaps(a[0], a[1], b[0], b[1]), (a, b)
    for start, end, _ in s.intervals():
        assert start < end


def test_generation_is_idempotent(make_params) -> None:
    p = make_params(short_break_after=frozenset({1, 3}))
    assert generate(p) == generate(p)


def test_no_lunch_after_last_period(make_params) -> None:
    s = generate(make_params(lunch_after_period=4))
    assert s.breaks == ()
    assert s.periods[-1].end_time == "11:00"


def test_no_short_break_after_last_period(make_params) -> None:
    s = generate(make_params(short_break_after=frozenset({4})))
    assert all(b.break_type == "lunch" for b in s.breaks)


def test_lunch_takes_precedence_over_short_break(make_params) -> None:
    s = generate(make_params(short_break_after=frozenset({2}), lunch_after_period=2))
    assert [b.break_type for b in s.breaks] == ["lunch"]
    assert [b.after_period for b in s.breaks] == [2]


def test_short_breaks_and_order_index(make_params) -> None:
    s = generate(make_params(short_break_after=frozenset({1, 3}), lunch_after_period=2))
    assert [b.break_type for b in s.breaks] == ["short_break", "lunch", "short_break"]
    assert [b.order_index for b in s.breaks] == [0, 1, 2]
    assert [p.order_index for p in s.periods] == [0, 1, 2, 3]
    assert s.breaks[0].id == "gen-break-1"
    assert s.breaks[1].id == "gen-lunch-2"


def test_default_config_fills_school_day(project_root) -> None:
    s = generate(load_config(project_root).params())
    assert len(s.periods) == 8
    assert len(s.breaks) == 2
    assert s.periods[0].start_time == "08:00"
    assert s.periods[-1].end_time == "15:00"


@pytest.mark.parametrize(
    "overrides",
    [
        {"periods_count": 0},
        {"period_duration": 0},
        {"short_break_duration": -5},
        {"lunch_duration": 0},
        {"lunch_after_period": 0},
        {"lunch_after_period": 5},
        {"short_break_after": frozenset({0})},
        {"short_break_after": frozenset({2, 9})},
    ],
)
def test_rejects_bad_parameters(make_params, overrides) -> None:
    with pytest.raises(ValidationError):
        generate(make_params(**overrides))


def test_rejects_schedule_past_midnight(make_params) -> None:
    with pytest.raises(ValidationError):
        generate(make_params(start_time="22:00", periods_count=4, period_duration=45))


def test_rejects_malformed_start(make_params) -> None:
    with pytest.raises(FormatError):
        generate(make_params(start_time="8am"))
