"""Tests for the Neuron facade: reset, snapshots, observers, invariants."""

import random

import pytest

from membrane.neuron import Neuron
from membrane.phase import Phase, PostsynapticEffect


def _assert_initial(neuron):
    assert neuron.phase == Phase.RESTING
    assert neuron.voltage == -70.0
    assert neuron.history == [-70.0] * 200
    assert not neuron.is_firing
    assert neuron.progress == 0.0
    assert neuron.transmitters == ()
    assert neuron.effect == PostsynapticEffect.NONE


def test_initial_state(neuron):
    _assert_initial(neuron)
    assert neuron.threshold_potential == -55.0
    assert neuron.resting_potential == -70.0


def test_reset_at_initial_state_is_silent(neuron, recorder):
    before = neuron.snapshot()
    neuron.reset()
    assert neuron.snapshot() == before
    assert recorder.events == []


def test_reset_after_firing(neuron):
    neuron.apply_stimulus(100.0)
    neuron.settle()
    neuron.reset()
    _assert_initial(neuron)


def test_reset_mid_flight_cancels_sequence(neuron):
    neuron.apply_stimulus(100.0)
    neuron.update(1.0)  # inside synaptic release
    assert neuron.transmitters
    assert neuron.effect == PostsynapticEffect.EXCITATORY

    neuron.reset()
    _assert_initial(neuron)
    assert not neuron.sequencer.busy

    # nothing left over to write on top of the reset
    neuron.update(10.0)
    _assert_initial(neuron)


def test_reset_cancels_subthreshold_transient(neuron):
    neuron.apply_stimulus(10.0)
    neuron.update(0.05)
    neuron.reset()
    neuron.update(1.0)
    _assert_initial(neuron)


def test_can_fire_after_reset(neuron):
    neuron.apply_stimulus(100.0)
    neuron.update(0.5)
    neuron.reset()
    assert neuron.apply_stimulus(20.0) == "fire"


def test_snapshot_is_a_copy(neuron):
    snap = neuron.snapshot()
    neuron.apply_stimulus(100.0)
    neuron.settle()
    assert snap.voltage == -70.0
    assert snap.history == tuple([-70.0] * 200)
    assert neuron.snapshot().history[-1] == -70.0
    assert neuron.snapshot().history[-3] == 40.0


def test_full_firing_scenario(neuron, recorder):
    neuron.apply_stimulus(100.0)
    neuron.settle()

    sizes = [len(batch) for batch in recorder.values("transmitters")]
    assert sizes == [10, 0]
    assert recorder.values("effect") == [
        PostsynapticEffect.EXCITATORY,
        PostsynapticEffect.NONE,
    ]
    assert max(recorder.values("voltage")) == 40.0
    assert min(recorder.values("voltage")) == -80.0


def test_unsubscribe(neuron):
    seen = []
    unsubscribe = neuron.subscribe(lambda *change: seen.append(change))
    neuron.apply_stimulus(20.0)
    count = len(seen)
    unsubscribe()
    neuron.settle()
    assert len(seen) == count
    unsubscribe()  # second call is harmless


def test_history_length_invariant_under_random_use():
    rng = random.Random(7)
    neuron = Neuron()
    lengths = []
    neuron.subscribe(lambda name, value, _: lengths.append(len(neuron.history)))

    for _ in range(300):
        action = rng.random()
        if action < 0.3:
            neuron.apply_stimulus(rng.uniform(0.0, 100.0))
        elif action < 0.4:
            neuron.reset()
        else:
            neuron.update(rng.uniform(0.0, 0.5))
        assert len(neuron.history) == 200

    assert lengths
    assert set(lengths) == {200}


def test_small_history_length():
    neuron = Neuron(history_length=2)
    neuron.apply_stimulus(100.0)
    neuron.settle()
    assert neuron.history == [-80.0, -70.0]


@pytest.mark.parametrize("dt", [1 / 60, 1 / 30, 0.25])
def test_frame_rate_does_not_change_outcome(dt):
    neuron = Neuron()
    neuron.apply_stimulus(20.0)
    for _ in range(int(4.0 / dt)):
        neuron.update(dt)
    assert neuron.history[-3:] == [40.0, -80.0, -70.0]
    assert neuron.phase == Phase.RESTING
    assert not neuron.is_firing


def test_snapshot_carries_transmitter_tokens(neuron):
    neuron.apply_stimulus(100.0)
    neuron.update(1.0)
    snap = neuron.snapshot()
    assert snap.transmitters == neuron.transmitters
    assert snap.transmitter_count == 10
    assert len({t.id for t in snap.transmitters}) == 10

    neuron.settle()
    assert snap.transmitter_count == 10
    assert neuron.snapshot().transmitters == ()
