"""
synapse_sim module: membrane/gate.py

All-or-none decision for an incoming stimulus.
"""

from __future__ import annotations
import logging
from typing import Optional

import config
from membrane.clock import PhaseClock
from membrane.sequencer import Sequencer, Task
from membrane.state import NeuronState

logger = logging.getLogger(__name__)

FIRE = "fire"
SUBTHRESHOLD = "subthreshold"
IGNORED = "ignored"


class StimulusGate:
    def __init__(
        self,
        state: NeuronState,
        clock: PhaseClock,
        sequencer: Sequencer,
        threshold_potential: float = config.THRESHOLD_POTENTIAL,
    ):
        self.state = state
        self.clock = clock
        self.sequencer = sequencer
        self.threshold_potential = threshold_potential

        # the live sub-threshold transient and the voltage it decays back to
        self._transient: Optional[Task] = None
        self._baseline = state.resting_potential

    def _drop_transient(self) -> None:
        if self._transient is not None and self.sequencer.cancel(self._transient):
            logger.debug("sub-threshold transient superseded")
        self._transient = None

    def _transient_live(self) -> bool:
        return self._transient is not None and not self._transient.done

    def apply(self, strength: float) -> str:
        """
        strength is expected in [0, 100]; the slider clamps it.
        Returns which path was taken. A new stimulus replaces a transient
        still in progress, so at most one sequence is live at a time.
        """
        if self.state.is_firing:
            logger.debug("stimulus %.1f ignored: already firing", strength)
            return IGNORED

        potential_change = self.state.resting_potential + strength

        if potential_change >= self.threshold_potential:
            logger.info("stimulus %.1f -> %.1f mV: firing", strength, potential_change)
            self._drop_transient()
            self.state.set("is_firing", True)
            self.sequencer.start(self.clock.fire(), name="action_potential")
            return FIRE

        logger.info("stimulus %.1f -> %.1f mV: below threshold", strength, potential_change)
        if not self._transient_live():
            self._baseline = self.state.voltage
        self._drop_transient()
        self._transient = self.sequencer.start(
            self.clock.fail(potential_change, self._baseline), name="subthreshold"
        )
        return SUBTHRESHOLD

    def forget(self) -> None:
        """
        Called on reset, after the sequencer has been cleared.
        """
        self._transient = None
        self._baseline = self.state.resting_potential
