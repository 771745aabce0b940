"""Shared fixtures."""

from __future__ import annotations

import os

# headless pygame for the render tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from membrane.neuron import Neuron


class Recorder:
    """Collects every change the state pushes to observers."""

    def __init__(self):
        self.events = []

    def __call__(self, name, value, transition):
        self.events.append((name, value, transition))

    def values(self, name):
        return [v for n, v, _ in self.events if n == name]


@pytest.fixture
def neuron():
    return Neuron()


@pytest.fixture
def recorder(neuron):
    rec = Recorder()
    neuron.subscribe(rec)
    return rec
