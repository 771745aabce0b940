"""
synapse_sim module: membrane/state.py

Shared simulation state for one neuron and its synapse.

The clock, the release sequence and reset write through set()/record();
everything else reads. Each effective write is pushed to subscribed observers
as (field_name, new_value, transition), where transition is the number of
seconds the change is meant to take on screen (0.0 for a jump).
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Callable, List, Tuple

import config
from membrane.phase import Phase, PostsynapticEffect
from membrane.trace import VoltageTrace

if TYPE_CHECKING:
    from membrane.synapse import Transmitter

logger = logging.getLogger(__name__)

Observer = Callable[[str, Any, float], None]

FIELDS = ("phase", "voltage", "is_firing", "progress", "transmitters", "effect")


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    voltage: float
    history: Tuple[float, ...]
    is_firing: bool
    progress: float
    transmitters: Tuple["Transmitter", ...]
    effect: PostsynapticEffect

    @property
    def transmitter_count(self) -> int:
        return len(self.transmitters)


class NeuronState:
    def __init__(
        self,
        resting_potential: float = config.RESTING_POTENTIAL,
        history_length: int = config.HISTORY_LENGTH,
    ):
        self.resting_potential = resting_potential
        self.phase = Phase.RESTING
        self.voltage = resting_potential
        self.trace = VoltageTrace(history_length, resting_potential)
        self.is_firing = False
        self.progress = 0.0
        self.transmitters: Tuple["Transmitter", ...] = ()
        self.effect = PostsynapticEffect.NONE

        self._observers: List[Observer] = []

    # ---- observers ----

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a change callback. Returns a function that removes it again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, name: str, value: Any, transition: float = 0.0) -> None:
        for observer in list(self._observers):
            observer(name, value, transition)

    # ---- writes ----

    def set(self, name: str, value: Any, transition: float = 0.0) -> None:
        if name not in FIELDS:
            raise KeyError(f"Unknown state field '{name}'")
        if getattr(self, name) == value:
            return
        setattr(self, name, value)
        if name == "phase":
            logger.debug("phase -> %s", value.label)
        self._notify(name, value, transition)

    def record(self, voltage: float) -> None:
        self.trace.append(voltage)
        self._notify("trace", self.trace)

    def restore(self) -> None:
        """
        Put every field back to its initial value. Unchanged fields stay silent.
        """
        self.set("phase", Phase.RESTING)
        self.set("voltage", self.resting_potential)
        if any(v != self.resting_potential for v in self.trace):
            self.trace.fill(self.resting_potential)
            self._notify("trace", self.trace)
        self.set("progress", 0.0)
        self.set("transmitters", ())
        self.set("effect", PostsynapticEffect.NONE)
        self.set("is_firing", False)

    # ---- reads ----

    def snapshot(self) -> Snapshot:
        return Snapshot(
            phase=self.phase,
            voltage=self.voltage,
            history=tuple(self.trace),
            is_firing=self.is_firing,
            progress=self.progress,
            transmitters=self.transmitters,
            effect=self.effect,
        )
