"""
synapse_sim module: render/widgets.py

Minimal pygame controls: a stepped horizontal slider and push buttons.
"""

from __future__ import annotations
from dataclasses import dataclass
import pygame


@dataclass
class Slider:
    rect: pygame.Rect
    min_value: float
    max_value: float
    step: float
    value: float
    dragging: bool = False

    def __post_init__(self):
        if self.max_value <= self.min_value:
            raise ValueError(f"empty slider range [{self.min_value}, {self.max_value}]")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        self.set_value(self.value)

    def set_value(self, v: float) -> bool:
        v = max(self.min_value, min(self.max_value, v))
        steps = round((v - self.min_value) / self.step)
        v = min(self.max_value, self.min_value + steps * self.step)
        changed = v != self.value
        self.value = v
        return changed

    def nudge(self, steps: int) -> bool:
        return self.set_value(self.value + steps * self.step)

    @property
    def fraction(self) -> float:
        return (self.value - self.min_value) / (self.max_value - self.min_value)

    @property
    def knob_x(self) -> int:
        return int(self.rect.left + self.fraction * self.rect.width)

    def value_at(self, x: float) -> float:
        t = (x - self.rect.left) / max(1, self.rect.width)
        return self.min_value + max(0.0, min(1.0, t)) * (self.max_value - self.min_value)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Returns True when the value changed.
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # generous vertical hit area around the track
            if self.rect.inflate(16, 24).collidepoint(event.pos):
                self.dragging = True
                return self.set_value(self.value_at(event.pos[0]))
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self.set_value(self.value_at(event.pos[0]))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        return False


@dataclass
class Button:
    rect: pygame.Rect
    label: str
    enabled: bool = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Returns True on a left click inside an enabled button.
        """
        if not self.enabled:
            return False
        return (
            event.type == pygame.MOUSEBUTTONDOWN
            and event.button == 1
            and self.rect.collidepoint(event.pos)
        )
