"""Tests for the all-or-none stimulus decision."""

import pytest

from membrane.gate import FIRE, IGNORED, SUBTHRESHOLD
from membrane.neuron import Neuron
from membrane.phase import Phase


@pytest.mark.parametrize("strength", [0.0, 5.0, 10.0, 14.0, 14.9])
def test_below_threshold_never_fires(neuron, recorder, strength):
    assert neuron.apply_stimulus(strength) == SUBTHRESHOLD
    assert not neuron.is_firing
    neuron.settle()

    assert True not in recorder.values("is_firing")
    assert recorder.values("transmitters") == []
    assert neuron.phase == Phase.RESTING
    assert neuron.voltage == -70.0


@pytest.mark.parametrize("strength", [15.0, 20.0, 55.0, 100.0])
def test_at_or_above_threshold_fires(neuron, strength):
    assert neuron.apply_stimulus(strength) == FIRE
    # guard is raised before any time passes
    assert neuron.is_firing
    assert neuron.phase == Phase.DEPOLARIZING


def test_threshold_is_inclusive(neuron):
    # -70 + 15 == -55 exactly
    assert neuron.apply_stimulus(15.0) == FIRE


def test_reentry_while_firing_is_ignored(neuron):
    neuron.apply_stimulus(20.0)
    neuron.update(1.0)
    before = neuron.snapshot()

    assert neuron.apply_stimulus(100.0) == IGNORED
    assert neuron.apply_stimulus(0.0) == IGNORED
    assert neuron.snapshot() == before
    assert len(neuron.sequencer) == 1


def test_fires_again_after_sequence_completes(neuron):
    neuron.apply_stimulus(20.0)
    neuron.settle()
    assert not neuron.is_firing
    assert neuron.apply_stimulus(20.0) == FIRE


def test_custom_threshold():
    n = Neuron(threshold_potential=-40.0)
    assert n.apply_stimulus(20.0) == SUBTHRESHOLD
    assert n.apply_stimulus(30.0) == FIRE


@pytest.mark.parametrize("delay", [0.05, 0.15, 0.35])
def test_firing_replaces_subthreshold_transient(neuron, recorder, delay):
    neuron.apply_stimulus(10.0)
    neuron.update(delay)

    mark = len(recorder.events)
    assert neuron.apply_stimulus(20.0) == FIRE
    assert len(neuron.sequencer) == 1
    neuron.settle()

    assert recorder.values("phase") == [
        Phase.DEPOLARIZING,
        Phase.REPOLARIZING,
        Phase.HYPERPOLARIZING,
        Phase.RESTING,
    ]
    after = [v for n, v, _ in recorder.events[mark:] if n == "voltage"]
    assert after == [40.0, -80.0, -70.0]
    assert neuron.history[-3:] == [40.0, -80.0, -70.0]
    assert neuron.voltage == -70.0
    assert not neuron.is_firing


def test_second_subthreshold_tap_decays_to_rest(neuron, recorder):
    neuron.apply_stimulus(10.0)
    neuron.update(0.05)
    assert neuron.apply_stimulus(5.0) == SUBTHRESHOLD
    assert len(neuron.sequencer) == 1
    neuron.settle()

    assert recorder.values("voltage") == [-60.0, -65.0, -70.0]
    assert recorder.values("phase") == [Phase.DEPOLARIZING, Phase.RESTING]
    assert neuron.voltage == -70.0
    assert neuron.phase == Phase.RESTING


def test_tap_during_decay_keeps_rest_baseline(neuron):
    neuron.apply_stimulus(10.0)
    neuron.update(0.4)  # decay ramp in flight
    neuron.apply_stimulus(10.0)
    neuron.settle()
    assert neuron.voltage == -70.0
    assert neuron.history[-1] == -70.0


def test_reset_clears_transient_baseline(neuron):
    neuron.apply_stimulus(10.0)
    neuron.update(0.05)
    neuron.reset()
    neuron.apply_stimulus(5.0)
    neuron.settle()
    assert neuron.voltage == -70.0
