"""
synapse_sim module: membrane/clock.py

PhaseClock: the timed phase sequences of the neuron.

Both sequences are generators for the Sequencer. The only voltage primitive is
ramp(): the voltage jumps to its target (the renderer eases the display over
the ramp duration) and the target is written to the trace once the ramp has
elapsed. Intermediate samples are never recorded.
"""

from __future__ import annotations
import logging
from typing import Optional

import config
from membrane.phase import Phase
from membrane.sequencer import Steps
from membrane.state import NeuronState
from membrane.synapse import SynapticRelease

logger = logging.getLogger(__name__)


class PhaseClock:
    def __init__(
        self,
        state: NeuronState,
        release: SynapticRelease,
        peak_potential: float = config.PEAK_POTENTIAL,
        hyperpolarization_depth: float = config.HYPERPOLARIZATION_DEPTH,
    ):
        self.state = state
        self.release = release
        self.peak_potential = peak_potential
        self.hyperpolarization_depth = hyperpolarization_depth

    @property
    def resting_potential(self) -> float:
        return self.state.resting_potential

    def ramp(self, target: float, duration: float) -> Steps:
        self.state.set("voltage", target, transition=duration)
        yield duration
        self.state.record(target)

    def propagate(self) -> Steps:
        """
        Pulse travels the axon, then the synapse releases.
        """
        self.state.set("progress", 0.0)
        self.state.set("progress", 1.0, transition=config.PROPAGATION_DURATION)
        yield config.PROPAGATION_DURATION

        yield from self.release.run()
        self.state.set("progress", 0.0)

    def fire(self) -> Steps:
        """
        Full action potential. The caller has already raised the firing guard.
        """
        rest = self.resting_potential

        self.state.set("phase", Phase.DEPOLARIZING)
        yield from self.ramp(self.peak_potential, config.DEPOLARIZE_DURATION)

        yield from self.propagate()

        self.state.set("phase", Phase.REPOLARIZING)
        yield from self.ramp(rest - self.hyperpolarization_depth, config.REPOLARIZE_DURATION)

        # refractory marker; no ramp of its own
        self.state.set("phase", Phase.HYPERPOLARIZING)
        yield from self.ramp(rest, config.RECOVERY_DURATION)
        self.state.set("phase", Phase.RESTING)

        self.state.set("is_firing", False)
        logger.debug("action potential complete")

    def fail(self, potential_change: float, baseline: Optional[float] = None) -> Steps:
        """
        Sub-threshold transient: a brief bump that decays without firing.
        It decays back to baseline, or to the voltage it started from.
        """
        before = self.state.voltage if baseline is None else baseline

        yield from self.ramp(potential_change, config.FAILED_RISE_DURATION)
        self.state.set("phase", Phase.DEPOLARIZING)
        yield config.FAILED_HOLD_DURATION

        yield from self.ramp(before, config.FAILED_DECAY_DURATION)
        self.state.set("phase", Phase.RESTING)
