"""
synapse_sim module: render/animation.py

Display-side smoothing. The core jumps values; this module eases them on
screen over the transition the core announced with each change.
Nothing here writes back into the simulation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import Any, Callable, Dict, Tuple
import uuid

from membrane.phase import PostsynapticEffect
from membrane.state import Snapshot

Point = Tuple[float, float]


def ease_in_out(t: float) -> float:
    t = max(0.0, min(1.0, t))
    return t * t * (3.0 - 2.0 * t)


def linear(t: float) -> float:
    return max(0.0, min(1.0, t))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_point(p: Point, q: Point, t: float) -> Point:
    return (lerp(p[0], q[0], t), lerp(p[1], q[1], t))


def quad_bezier(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    a = lerp_point(p0, p1, t)
    b = lerp_point(p1, p2, t)
    return lerp_point(a, b, t)


@dataclass
class Tween:
    value: float
    easing: Callable[[float], float] = ease_in_out
    start: float = 0.0
    target: float = 0.0
    duration: float = 0.0
    elapsed: float = 0.0

    def __post_init__(self):
        self.start = self.value
        self.target = self.value

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration

    def retarget(self, target: float, duration: float) -> None:
        self.start = self.value
        self.target = float(target)
        self.duration = max(0.0, duration)
        self.elapsed = 0.0
        if self.duration == 0.0:
            self.value = self.target

    def update(self, dt: float) -> None:
        if self.done:
            self.value = self.target
            return
        self.elapsed += dt
        self.value = lerp(self.start, self.target, self.easing(self.elapsed / self.duration))


@dataclass
class Particle:
    # fixed scatter around the release curve, purely visual
    jitter_x: float
    jitter_y: float


@dataclass
class SceneAnimator:
    """
    Observer of the neuron state; holds the eased values the renderer draws.
    """
    voltage: Tween
    progress: Tween
    effect: Tween
    particles: Dict[uuid.UUID, Particle] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)

    @staticmethod
    def from_snapshot(snap: Snapshot, seed: int | None = None) -> "SceneAnimator":
        excited = 1.0 if snap.effect == PostsynapticEffect.EXCITATORY else 0.0
        return SceneAnimator(
            voltage=Tween(snap.voltage),
            progress=Tween(snap.progress, easing=linear),
            effect=Tween(excited),
            rng=random.Random(seed),
        )

    def __call__(self, name: str, value: Any, transition: float) -> None:
        if name == "voltage":
            self.voltage.retarget(value, transition)
        elif name == "progress":
            self.progress.retarget(value, transition)
        elif name == "effect":
            excited = 1.0 if value == PostsynapticEffect.EXCITATORY else 0.0
            self.effect.retarget(excited, transition)
        elif name == "transmitters":
            self._sync_particles(value)

    def _sync_particles(self, transmitters) -> None:
        live = {t.id for t in transmitters}
        for pid in list(self.particles):
            if pid not in live:
                del self.particles[pid]
        for pid in live:
            if pid not in self.particles:
                self.particles[pid] = Particle(
                    jitter_x=self.rng.uniform(-20.0, 20.0),
                    jitter_y=self.rng.uniform(-10.0, 10.0),
                )

    def update(self, dt: float) -> None:
        self.voltage.update(dt)
        self.progress.update(dt)
        self.effect.update(dt)

    def snap_to(self, snap: Snapshot) -> None:
        """
        Drop any running tweens (used after reset).
        """
        self.voltage.retarget(snap.voltage, 0.0)
        self.progress.retarget(snap.progress, 0.0)
        excited = 1.0 if snap.effect == PostsynapticEffect.EXCITATORY else 0.0
        self.effect.retarget(excited, 0.0)
        if snap.transmitter_count == 0:
            self.particles.clear()
