"""
synapse_sim module: membrane/synapse.py

Chemical transmission at the synapse, run once per action potential:
- release a fresh batch of transmitter tokens
- short diffusion delay, then an excitatory postsynaptic response
- dwell, then the response and the batch clear together
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import uuid

import config
from membrane.phase import PostsynapticEffect
from membrane.sequencer import Steps
from membrane.state import NeuronState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transmitter:
    # opaque identity only; the renderer keys particles on it
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class SynapticRelease:
    def __init__(
        self,
        state: NeuronState,
        batch_size: int = config.TRANSMITTER_BATCH,
        diffusion_delay: float = config.DIFFUSION_DELAY,
        rise: float = config.EPSP_RISE_DURATION,
        dwell: float = config.EPSP_DWELL,
        fade: float = config.EPSP_FADE_DURATION,
    ):
        self.state = state
        self.batch_size = batch_size
        self.diffusion_delay = diffusion_delay
        self.rise = rise
        self.dwell = dwell
        self.fade = fade

    def release_batch(self) -> tuple[Transmitter, ...]:
        return tuple(Transmitter() for _ in range(self.batch_size))

    def run(self) -> Steps:
        """
        Sequence; only ever driven from inside a firing sequence.
        """
        self.state.set("transmitters", self.release_batch())
        logger.debug("released %d transmitters", self.batch_size)
        yield self.diffusion_delay

        self.state.set("effect", PostsynapticEffect.EXCITATORY, transition=self.rise)
        yield self.rise
        yield self.dwell

        self.state.set("effect", PostsynapticEffect.NONE, transition=self.fade)
        self.state.set("transmitters", (), transition=self.fade)
        logger.debug("synapse cleared")
        yield self.fade
