import pytest

from space_shooter.driver import FixedStepDriver


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, dt):
        self.calls.append(dt)


def test_first_tick_only_records_time():
    recorder = Recorder()
    driver = FixedStepDriver(0.125, recorder)

    assert driver.tick(10.0) == 0
    assert recorder.calls == []
    assert driver.last_time == 10.0


@pytest.mark.parametrize(
    "elapsed, expected",
    [(0.0, 0), (0.1, 0), (0.125, 1), (0.3, 2), (1.0, 8), (2.05, 16)],
)
def test_runs_floor_of_elapsed_over_step(elapsed, expected):
    recorder = Recorder()
    driver = FixedStepDriver(0.125, recorder)
    driver.tick(0.0)

    assert driver.tick(elapsed) == expected
    assert recorder.calls == [0.125] * expected


def test_remainder_carries_to_next_tick():
    recorder = Recorder()
    driver = FixedStepDriver(0.25, recorder)
    driver.tick(0.0)

    assert driver.tick(0.6) == 2
    assert driver.accumulator == pytest.approx(0.1)
    assert driver.tick(0.8) == 1
    assert driver.steps_run == 3


def test_sixty_hertz_steps():
    recorder = Recorder()
    driver = FixedStepDriver(1 / 60, recorder)
    driver.tick(100.0)

    assert driver.tick(101.0) == 60
    # over many frames no time is lost
    for i in range(1, 601):
        driver.tick(101.0 + i / 120)
    assert driver.steps_run == 360


@pytest.mark.parametrize("frames", [1, 59, 60, 123, 245, 246, 247, 490, 600])
def test_whole_number_of_sixty_hertz_steps(frames):
    recorder = Recorder()
    driver = FixedStepDriver(1 / 60, recorder)
    driver.tick(0.0)

    assert driver.tick(frames / 60) == frames
    assert len(recorder.calls) == frames
    assert driver.accumulator < driver.step


def test_clock_going_backwards_runs_nothing():
    recorder = Recorder()
    driver = FixedStepDriver(0.1, recorder)
    driver.tick(5.0)

    assert driver.tick(4.0) == 0
    assert driver.tick(4.25) == 2


@pytest.mark.parametrize("step", [0, -0.1])
def test_step_must_be_positive(step):
    with pytest.raises(ValueError):
        FixedStepDriver(step, Recorder())
