"""
synapse_sim module: membrane/sequencer.py

Cooperative timed sequences on a single simulation clock.

A sequence is a generator: it mutates state, then yields how many seconds to
wait before it resumes. The frame loop calls advance(dt); tests call
run_until_idle() and never sleep.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Generator, List, Optional

logger = logging.getLogger(__name__)

Steps = Generator[float, None, None]


@dataclass
class Task:
    name: str
    steps: Steps
    wake_at: float
    order: int
    done: bool = False


class Sequencer:
    def __init__(self):
        self.now = 0.0
        self._tasks: List[Task] = []
        self._next_order = 0

    @property
    def busy(self) -> bool:
        return bool(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def start(self, steps: Steps, name: str = "") -> Task:
        """
        Run a sequence up to its first wait, then keep it scheduled.
        """
        task = Task(name=name, steps=steps, wake_at=self.now, order=self._next_order)
        self._next_order += 1
        logger.debug("start %s at t=%.3f", name or "sequence", self.now)
        self._resume(task)
        if not task.done:
            self._tasks.append(task)
        return task

    def _resume(self, task: Task) -> None:
        try:
            wait = next(task.steps)
        except StopIteration:
            task.done = True
            return
        except Exception:
            task.done = True
            raise

        if wait < 0:
            task.steps.close()
            task.done = True
            raise ValueError(f"{task.name or 'sequence'} yielded a negative wait ({wait})")

        # chain from the scheduled wake time, not from the frame that noticed it
        task.wake_at += wait

    def advance(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._advance_to(self.now + dt)

    def _advance_to(self, target: float) -> None:
        while True:
            due = [t for t in self._tasks if t.wake_at <= target]
            if not due:
                break
            task = min(due, key=lambda t: (t.wake_at, t.order))
            self.now = max(self.now, task.wake_at)
            try:
                self._resume(task)
            finally:
                if task.done:
                    self._tasks.remove(task)
                    logger.debug("done %s at t=%.3f", task.name or "sequence", self.now)
        self.now = target

    def run_until_idle(self, limit: Optional[float] = None) -> float:
        """
        Jump from wake time to wake time until nothing is scheduled.
        Returns the simulated seconds that passed.
        """
        started = self.now
        while self._tasks:
            wake = min(t.wake_at for t in self._tasks)
            if limit is not None and wake - started > limit:
                raise RuntimeError(f"sequences still running after {limit}s")
            self._advance_to(max(self.now, wake))
        return self.now - started

    def cancel(self, task: Task) -> bool:
        """
        Close one scheduled sequence. Returns False if it had already finished.
        """
        if task not in self._tasks:
            return False
        task.steps.close()
        task.done = True
        self._tasks.remove(task)
        logger.debug("cancelled %s at t=%.3f", task.name or "sequence", self.now)
        return True

    def cancel_all(self) -> int:
        cancelled = len(self._tasks)
        for task in self._tasks:
            task.steps.close()
            task.done = True
        self._tasks.clear()
        if cancelled:
            logger.debug("cancelled %d sequence(s)", cancelled)
        return cancelled
