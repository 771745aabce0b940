"""
synapse_sim module: membrane/neuron.py

Neuron: owns the state, the sequencer and the three sequence components.
The UI talks to this class only: apply_stimulus(), reset(), update(dt), plus
read-only properties, snapshots and change subscriptions.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Tuple

import config
from membrane.clock import PhaseClock
from membrane.gate import StimulusGate
from membrane.phase import Phase, PostsynapticEffect
from membrane.sequencer import Sequencer
from membrane.state import NeuronState, Observer, Snapshot
from membrane.synapse import SynapticRelease, Transmitter

logger = logging.getLogger(__name__)


class Neuron:
    def __init__(
        self,
        resting_potential: float = config.RESTING_POTENTIAL,
        threshold_potential: float = config.THRESHOLD_POTENTIAL,
        peak_potential: float = config.PEAK_POTENTIAL,
        history_length: int = config.HISTORY_LENGTH,
        batch_size: int = config.TRANSMITTER_BATCH,
    ):
        self.state = NeuronState(resting_potential=resting_potential, history_length=history_length)
        self.sequencer = Sequencer()
        self.release = SynapticRelease(self.state, batch_size=batch_size)
        self.clock = PhaseClock(self.state, self.release, peak_potential=peak_potential)
        self.gate = StimulusGate(
            self.state, self.clock, self.sequencer, threshold_potential=threshold_potential
        )

    # ---- inputs ----

    def apply_stimulus(self, strength: float) -> str:
        return self.gate.apply(strength)

    def reset(self) -> None:
        # stop in-flight sequences first so none of them writes over the reset
        cancelled = self.sequencer.cancel_all()
        self.state.restore()
        self.gate.forget()
        logger.info("reset (%d sequence(s) cancelled)", cancelled)

    def update(self, dt: float) -> None:
        self.sequencer.advance(dt)

    def settle(self) -> float:
        """
        Run every pending sequence to completion without waiting in real time.
        """
        return self.sequencer.run_until_idle()

    # ---- outputs ----

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self.state.subscribe(observer)

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def voltage(self) -> float:
        return self.state.voltage

    @property
    def history(self) -> List[float]:
        return self.state.trace.as_list()

    @property
    def is_firing(self) -> bool:
        return self.state.is_firing

    @property
    def progress(self) -> float:
        return self.state.progress

    @property
    def transmitters(self) -> Tuple[Transmitter, ...]:
        return self.state.transmitters

    @property
    def effect(self) -> PostsynapticEffect:
        return self.state.effect

    @property
    def threshold_potential(self) -> float:
        return self.gate.threshold_potential

    @property
    def resting_potential(self) -> float:
        return self.state.resting_potential
