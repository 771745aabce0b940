"""
synapse_sim module: membrane/phase.py

Action potential phases and postsynaptic response states.
"""

from __future__ import annotations
from enum import Enum


class Phase(Enum):
    RESTING = "Resting"
    DEPOLARIZING = "Depolarizing"
    REPOLARIZING = "Repolarizing"
    HYPERPOLARIZING = "Hyperpolarizing"

    @property
    def label(self) -> str:
        return self.value


class PostsynapticEffect(Enum):
    NONE = 0
    EXCITATORY = 1  # EPSP
    INHIBITORY = 2  # IPSP, never produced by the release sequence
