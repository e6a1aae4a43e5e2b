from train_sim.timing import LogTimer, Timing


def test_single_duration_shows_total_only():
    timing = Timing()
    timing.update(0.5)
    assert str(timing) == "total: 0.500000000"


def test_multiple_durations_show_min_max_avg_total():
    timing = Timing()
    for d in (1.0, 3.0, 2.0):
        timing.update(d)

    assert timing.count == 3
    assert str(timing).splitlines() == [
        "min: 1.000000000",
        "max: 3.000000000",
        "avg: 2.000000000",
        "tot: 6.000000000",
    ]


def test_empty_timing_dict_has_no_extremes():
    d = Timing().as_dict()
    assert d["count"] == 0
    assert d["min_s"] is None
    assert d["total_s"] == 0.0


def test_log_timer_fires_once_interval_has_passed():
    ticks = iter([0.0, 5.0, 10.5, 12.0, 21.0])
    timer = LogTimer(interval_s=10.0, clock=lambda: next(ticks))

    assert [timer.update() for _ in range(4)] == [False, True, False, True]


def test_log_timer_waits_for_more_than_the_interval():
    ticks = iter([0.0, 10.0, 10.5, 20.5, 20.6])
    timer = LogTimer(interval_s=10.0, clock=lambda: next(ticks))

    assert [timer.update() for _ in range(4)] == [False, True, False, True]


def test_zero_interval_reports_whenever_the_clock_moves():
    ticks = iter([0.0, 0.5, 0.5, 1.0])
    timer = LogTimer(interval_s=0.0, clock=lambda: next(ticks))

    assert [timer.update() for _ in range(3)] == [True, False, True]
