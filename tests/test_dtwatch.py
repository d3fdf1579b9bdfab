import pytest

from pixeldemos.dtwatch import DtWatch


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_not_started_raises():
    watch = DtWatch(FakeClock())
    assert watch.is_started is False
    with pytest.raises(RuntimeError):
        watch.dt()
    with pytest.raises(RuntimeError):
        watch.dt_since_start()


def test_dt_measures_between_calls():
    clock = FakeClock()
    watch = DtWatch(clock)
    watch.start()
    assert watch.is_started is True
    clock.now += 0.25
    assert watch.dt() == pytest.approx(0.25)
    clock.now += 1.5
    assert watch.dt() == pytest.approx(1.5)
    assert watch.dt() == 0.0


def test_dt_since_start_is_cumulative():
    clock = FakeClock()
    watch = DtWatch(clock)
    watch.start()
    clock.now += 2.0
    watch.dt()
    clock.now += 3.0
    assert watch.dt_since_start() == pytest.approx(5.0)


def test_shifting_start_time_pauses_clock():
    clock = FakeClock()
    watch = DtWatch(clock)
    watch.start()
    clock.now += 1.0
    watch.dt()
    clock.now += 4.0
    watch.started_at += watch.dt()
    assert watch.dt_since_start() == pytest.approx(1.0)


def test_restart_resets():
    clock = FakeClock()
    watch = DtWatch(clock)
    watch.start()
    clock.now += 9.0
    watch.start()
    assert watch.dt_since_start() == 0.0
    assert watch.dt() == 0.0