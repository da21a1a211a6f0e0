from src.layout.intensity import count_active_during, peak_window, sweep
from src.layout.models import DayWindow, Event, Interval
from src.layout.overlap import overlapping, overlaps
from src.layout.slots import densest_group, layout_slot, local_overlap, peak_concurrency
from src.layout.timeaxis import to_minutes, to_pixels

WINDOW = DayWindow(start_hour=9, end_hour=21)


def test_to_minutes_is_relative_to_window_start():
    assert to_minutes(Event(1, "10:15", 30), WINDOW) == Interval(75, 105)
    assert to_minutes(Event(2, "08:30", 60), WINDOW) == Interval(-30, 30)


def test_to_pixels_scales_by_hour_height():
    assert to_pixels(90, WINDOW, 1200) == 150
    assert to_pixels(-60, WINDOW, 1200) == -100


def test_overlap_predicate_is_half_open():
    assert overlaps(Interval(0, 60), 30, 60)
    assert overlaps(Interval(30, 40), 0, 60)
    assert overlaps(Interval(0, 120), 30, 10)
    assert not overlaps(Interval(0, 60), 60, 60)
    assert not overlaps(Interval(60, 120), 0, 60)


def test_zero_length_target_only_matches_running_candidates():
    assert overlaps(Interval(0, 60), 30, 0)
    assert not overlaps(Interval(30, 30), 30, 0)


def test_overlapping_keeps_candidate_order():
    events = [Event(3, "10:30", 30), Event(1, "09:00", 30), Event(2, "10:00", 60)]

    matches = overlapping(Interval(60, 120), events, WINDOW)

    assert [event.event_id for event in matches] == [3, 2]


def test_sweep_orders_boundaries_by_time():
    timeline = sweep([Interval(0, 60), Interval(30, 90)])

    assert timeline == [(0, 1), (30, 2), (60, 1), (90, 0)]


def test_peak_window_picks_first_strict_maximum():
    intervals = [Interval(0, 90), Interval(60, 150), Interval(120, 180)]

    assert peak_window(intervals) == Interval(60, 90)
    assert peak_window([]) is None


def test_count_active_during_counts_containment():
    intervals = [Interval(0, 90), Interval(60, 150), Interval(70, 80)]

    assert count_active_during(Interval(60, 90), intervals) == 2
    assert count_active_during(None, intervals) == 0


def test_local_overlap_sorts_longest_first():
    events = [Event(1, "17:00", 60), Event(2, "17:00", 120), Event(3, "17:30", 60)]

    local = local_overlap(events[0], events, WINDOW)

    assert [event.event_id for event in local] == [2, 1, 3]


def test_densest_group_picks_largest_overlap_set():
    events = [Event(1, "09:00", 90), Event(2, "10:00", 90), Event(3, "11:00", 60)]

    group = densest_group(events, events, WINDOW)

    assert [event.event_id for event in group] == [1, 2, 3]
    assert densest_group([], events, WINDOW) == []


def test_empty_group_falls_back_to_single_column():
    assert peak_concurrency([], WINDOW) == 1


def test_layout_slot_for_overlapping_pair():
    events = [Event(1, "17:00", 60), Event(2, "17:00", 120)]

    slot = layout_slot(events[0], events, WINDOW)

    assert slot.width_percent == 50
    assert slot.left_percent == 50


def test_end_clock_wraps_past_midnight():
    assert Event(1, "17:00", 120).end_clock == "19:00"
    assert Event(2, "23:30", 60).end_clock == "00:30"
    assert Event(3, "7:05", 0).end_clock == "07:05"


def test_sweep_keeps_input_order_at_equal_times():
    assert sweep([Interval(0, 60), Interval(60, 120)]) == [(0, 1), (60, 0), (60, 1), (120, 0)]
    assert sweep([Interval(60, 120), Interval(0, 60)]) == [(0, 1), (60, 2), (60, 1), (120, 0)]


def test_peak_window_when_start_and_end_coincide():
    assert peak_window([Interval(0, 60), Interval(60, 120)]) == Interval(0, 60)
    assert peak_window([Interval(60, 120), Interval(0, 60)]) == Interval(60, 60)


def test_local_overlap_keeps_arrival_order_for_equal_durations():
    events = [Event(3, "10:00", 30), Event(1, "10:00", 60), Event(2, "10:00", 30)]

    local = local_overlap(events[0], events, WINDOW)

    assert [event.event_id for event in local] == [1, 3, 2]


def test_densest_group_keeps_first_of_equal_sizes():
    early = Event(1, "09:00", 60)
    middle = Event(2, "09:30", 60)
    late = Event(3, "10:15", 45)
    events = [early, middle, late]

    assert [event.event_id for event in densest_group([early, late], events, WINDOW)] == [1, 2]
    assert [event.event_id for event in densest_group([late, early], events, WINDOW)] == [2, 3]


def test_start_is_parsed_once_at_construction(monkeypatch):
    events = [Event(1, "09:00", 90), Event(2, "10:00", 90), Event(3, "11:00", 60)]

    def _fail(value):
        raise AssertionError(f"start {value!r} parsed again")

    monkeypatch.setattr("src.layout.models.parse_clock", _fail)

    assert [to_minutes(event, WINDOW) for event in events] == [
        Interval(0, 90),
        Interval(60, 150),
        Interval(120, 180),
    ]
    assert layout_slot(events[1], events, WINDOW).width_percent == 50
