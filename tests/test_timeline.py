from classtiming import ScheduleSet, assemble, generate, timeline
from classtiming.models import Break, Period


def test_timeline_interleaves_by_start(make_params) -> None:
    s = generate(make_params(short_break_after=frozenset({1})))
    entries = timeline(s)
    assert [(e.kind, e.label) for e in entries] == [
        ("period", "P1"),
        ("break", "Break"),
        ("period", "P2"),
        ("break", "Lunch"),
        ("period", "P3"),
        ("period", "P4"),
    ]
    starts = [e.start_time for e in entries]
    assert starts == sorted(starts)


def test_equal_start_puts_periods_first() -> None:
    b = Break("b", "Assembly", "", "08:00", "08:15", "assembly", 0)
    p = Period("p", 1, "Period 1", "P1", "08:00", "08:45")
    entries = assemble([p], [b])
    assert [e.kind for e in entries] == ["period", "break"]


def test_equal_start_same_kind_keeps_input_order() -> None:
    a = Period("a", 1, "A", "", "08:00", "08:45")
    b = Period("b", 2, "B", "", "08:00", "08:30")
    assert [e.name for e in assemble([b, a], [])] == ["B", "A"]


def test_assemble_does_not_touch_inputs(make_params) -> None:
    s = generate(make_params())
    periods, breaks = list(s.periods), list(s.breaks)
    assemble(periods, breaks)
    assert periods == list(s.periods)
    assert breaks == list(s.breaks)


def test_empty_timeline() -> None:
    assert timeline(ScheduleSet.empty()) == []
