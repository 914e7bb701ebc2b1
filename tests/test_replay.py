import asyncio
import threading

import pytest

from algorithms import AlgorithmType
from algorithms.step import AnimationStep, StepType
from engine.effects import apply_step
from engine.replay import (CHECKPOINT_INTERVAL, MAX_SPEED, MIN_SPEED, ReplayBusyError, ReplayEngine, ReplayState,
                           clamp_speed, delay_for_speed)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000


@pytest.fixture
def sorted_run(bar_state):
    """A state loaded with a reversed array plus the bubble sort log for it."""
    from algorithms.dispatcher import generate_steps

    data = list(range(12, 0, -1))
    st = bar_state(data)
    return st, generate_steps(AlgorithmType.BUBBLE_SORT, data)


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("speed,delay", [(1, 396), (50, 200), (99, 4), (100, 1)])
def test_delay_for_speed(speed, delay):
    assert delay_for_speed(speed) == delay


def test_speed_is_clamped():
    assert clamp_speed(0) == MIN_SPEED
    assert clamp_speed(500) == MAX_SPEED
    assert delay_for_speed(-20) == delay_for_speed(MIN_SPEED)
    assert delay_for_speed(1000) == delay_for_speed(MAX_SPEED)


def test_state_speed_setter_clamps(state):
    state.set_speed(250)
    assert state.speed == MAX_SPEED


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------
def test_start_step_to_completion(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    assert engine.status is ReplayState.RUNNING
    assert st.is_playing

    applied = 0
    while engine.step():
        applied += 1

    assert applied == len(steps)
    assert engine.status is ReplayState.IDLE
    assert st.array == sorted(st.array)
    assert st.is_sorted
    assert not st.is_playing
    assert st.highlight_indices == [] and st.swap_indices == []
    assert st.current_step == len(steps) - 1


def test_empty_log_stays_idle(state):
    engine = ReplayEngine(state)
    engine.start([])
    assert engine.status is ReplayState.IDLE
    assert not state.is_playing
    assert not engine.step()


def test_second_start_while_live_is_rejected(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    with pytest.raises(ReplayBusyError):
        engine.start(steps)
    engine.pause()
    with pytest.raises(ReplayBusyError):
        engine.start(steps)


def test_pause_and_resume(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    engine.pause()
    assert engine.status is ReplayState.PAUSED
    assert not engine.tick(now=10_000)
    # manual stepping still works while paused
    assert engine.step()
    engine.resume()
    assert engine.status is ReplayState.RUNNING


def test_stop_keeps_mutations_and_drops_overlays(bar_state):
    st = bar_state([3, 1, 2])
    steps = [
        AnimationStep.target(2),
        AnimationStep.swap(0, 1),
        AnimationStep.update_aux(0, 5),
        AnimationStep.found(1),
        AnimationStep.compare(0, 2),
        AnimationStep.swap(1, 2),
    ]
    engine = ReplayEngine(st)
    engine.start(steps)
    for _ in range(5):
        engine.step()
    engine.stop()

    assert engine.status is ReplayState.STOPPED
    assert st.array == [1, 3, 2]
    assert st.highlight_indices == []
    assert st.swap_indices == []
    assert st.found_indices == []
    assert st.target_indices == []
    assert st.aux_array == []
    assert not st.is_playing
    assert not st.is_sorted
    assert st.current_step == -1
    assert not engine.step()


def test_stop_when_idle_is_harmless(state):
    engine = ReplayEngine(state)
    engine.stop()
    assert engine.status is ReplayState.IDLE


def test_restart_after_stop(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    engine.stop()
    engine.start(steps[:1])
    assert engine.status is ReplayState.RUNNING


# ---------------------------------------------------------------------------
# Timing drivers
# ---------------------------------------------------------------------------
def test_tick_waits_for_delay(sorted_run):
    st, steps = sorted_run
    clock = FakeClock()
    st.set_speed(50)
    engine = ReplayEngine(st, clock=clock)
    engine.start(steps)

    clock.advance(150)
    assert not engine.tick()
    clock.advance(100)
    assert engine.tick()
    assert engine.position == 1
    assert not engine.tick()
    clock.advance(250)
    assert engine.tick()
    assert engine.position == 2


def test_run_blocks_until_done_with_one_sleep_per_step(sorted_run):
    st, steps = sorted_run
    sleeps = []
    engine = ReplayEngine(st)
    engine.start(steps)
    engine.run(sleep=sleeps.append)

    assert engine.status is ReplayState.IDLE
    assert st.array == sorted(st.array)
    assert len(sleeps) == len(steps)
    assert all(s == engine.delay_ms / 1000 for s in sleeps)


def test_run_returns_when_stopped_from_another_thread(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    seen = []

    def sleep(_):
        seen.append(1)
        if len(seen) == 3:
            stopper = threading.Thread(target=engine.stop)
            stopper.start()
            stopper.join()

    engine.run(sleep=sleep)
    assert engine.status is ReplayState.STOPPED
    assert len(seen) == 3


def test_run_async(sorted_run):
    st, steps = sorted_run
    st.set_speed(MAX_SPEED)
    engine = ReplayEngine(st)
    engine.start(steps)
    asyncio.run(engine.run_async())

    assert engine.status is ReplayState.IDLE
    assert st.array == sorted(st.array)


def test_on_step_callback_and_subscribers(sorted_run):
    st, steps = sorted_run
    seen, renders = [], []
    unsubscribe = st.subscribe(lambda s: renders.append(s.current_step))
    engine = ReplayEngine(st, on_step=seen.append)
    engine.start(steps[:3])
    while engine.step():
        pass
    unsubscribe()

    assert seen == steps[:3]
    assert 0 in renders and 2 in renders
    n = len(renders)
    st.notify()
    assert len(renders) == n


# ---------------------------------------------------------------------------
# Scrubbing
# ---------------------------------------------------------------------------
def expected_after(bar_state, data, steps, index):
    st = bar_state(data)
    for step in steps[:index + 1]:
        apply_step(st, step)
    return st


def test_seek_forward_and_back_matches_sequential_replay(bar_state):
    from algorithms.dispatcher import generate_steps

    data = list(range(30, 0, -1))
    steps = generate_steps(AlgorithmType.BUBBLE_SORT, data)
    assert len(steps) > 3 * CHECKPOINT_INTERVAL

    st = bar_state(data)
    engine = ReplayEngine(st)
    engine.start(steps)

    for index in [170, 20, 155, -1, 3 * CHECKPOINT_INTERVAL, len(steps) - 1, 0]:
        assert engine.seek(index)
        want = expected_after(bar_state, data, steps, index)
        assert st.array == want.array, index
        assert st.highlight_indices == want.highlight_indices
        assert st.swap_indices == want.swap_indices
        assert st.current_step == index
        assert engine.status is ReplayState.PAUSED


def test_seek_then_resume_continues_from_there(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    engine.seek(9)
    assert engine.position == 10
    engine.resume()
    while engine.step():
        pass
    assert st.array == sorted(st.array)


def test_seek_out_of_range(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    assert not engine.seek(0)
    engine.start(steps)
    assert not engine.seek(len(steps))
    assert not engine.seek(-2)


def test_seek_restores_grid(state, walled_grid):
    state.set_algorithm(AlgorithmType.BFS)
    state.grid = walled_grid
    steps = state.prepare_run()
    engine = ReplayEngine(state)
    engine.start(steps)
    while engine.position < len(steps) - 1:
        engine.step()

    engine.seek(-1)
    assert all(not node.is_visited for node in state.grid)
    engine.seek(0)
    first = steps[0]
    assert first.type is StepType.VISIT
    assert state.grid[(first.indices[0], first.indices[1])].is_visited


def test_seek_back_after_completion_clears_sorted_flag(sorted_run):
    st, steps = sorted_run
    engine = ReplayEngine(st)
    engine.start(steps)
    while engine.step():
        pass
    assert st.is_sorted

    engine.seek(len(steps) // 2)
    assert not st.is_sorted
    assert st.array != sorted(st.array)

    engine.seek(len(steps) - 1)
    assert st.is_sorted
    assert st.array == sorted(st.array)
