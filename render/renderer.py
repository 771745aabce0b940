"""
synapse_sim module: render/renderer.py

Pygame rendering of the neuron pair, the voltage graph and the controls.
Reads state only; never mutates the simulation.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
import pygame

import config
from membrane.phase import Phase
from membrane.state import Snapshot
from render import colors
from render.animation import SceneAnimator, lerp, quad_bezier
from render.widgets import Button, Slider

HEADER_H = 80
CANVAS_H = 200
GRAPH_H = 150
NEURON_R = 20


@dataclass
class Layout:
    header: pygame.Rect
    canvas: pygame.Rect
    graph: pygame.Rect
    controls: pygame.Rect

    @staticmethod
    def for_screen(w: int, h: int) -> "Layout":
        header = pygame.Rect(0, 0, w, HEADER_H)
        canvas = pygame.Rect(0, header.bottom, w, CANVAS_H)
        graph = pygame.Rect(0, canvas.bottom, w, GRAPH_H)
        controls = pygame.Rect(0, graph.bottom, w, max(0, h - graph.bottom))
        return Layout(header=header, canvas=canvas, graph=graph, controls=controls)

    def slider_rect(self) -> pygame.Rect:
        c = self.controls
        return pygame.Rect(c.left + 40, c.top + 56, c.width - 80, 8)

    def fire_button_rect(self) -> pygame.Rect:
        c = self.controls
        return pygame.Rect(c.left + 40, c.bottom - 70, c.width - 240, 44)

    def reset_button_rect(self) -> pygame.Rect:
        c = self.controls
        return pygame.Rect(c.right - 180, c.bottom - 70, 140, 44)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def phase_color(phase: Phase) -> tuple[int, int, int]:
    if phase == Phase.RESTING:
        return colors.RESTING
    elif phase == Phase.DEPOLARIZING:
        return colors.DEPOLARIZING
    elif phase == Phase.REPOLARIZING:
        return colors.REPOLARIZING
    return colors.HYPERPOLARIZING


def stimulus_color(strength: float, threshold: float = config.THRESHOLD_POTENTIAL) -> tuple[int, int, int]:
    # same rule as the gate: green when the stimulus would fire
    return colors.SUPRA if config.RESTING_POTENTIAL + strength >= threshold else colors.SUB


def voltage_to_y(voltage: float, rect: pygame.Rect) -> float:
    span = config.GRAPH_V_MAX - config.GRAPH_V_MIN
    normalized = (voltage - config.GRAPH_V_MIN) / span
    return rect.top + rect.height * (1.0 - normalized)


def _mix(a: tuple, b: tuple, t: float) -> tuple[int, int, int]:
    return tuple(int(lerp(x, y, t)) for x, y in zip(a, b))


def _blit_centered(screen: pygame.Surface, txt: pygame.Surface, cx: float, y: float) -> None:
    screen.blit(txt, (int(cx - txt.get_width() / 2), int(y)))


def draw_header(screen: pygame.Surface, rect: pygame.Rect, phase: Phase, is_firing: bool) -> None:
    pygame.draw.rect(screen, colors.PANEL, rect)

    title = _font(34).render("Electrochemical Symphony", True, colors.TEXT)
    _blit_centered(screen, title, rect.centerx, rect.top + 10)

    caption = _font(24).render("Current Phase:", True, colors.TEXT_DIM)
    label = _font(26).render(phase.label, True, phase_color(phase))

    total_w = caption.get_width() + 12 + label.get_width() + 20
    x = rect.centerx - total_w / 2
    y = rect.top + 46
    screen.blit(caption, (int(x), y))

    pill = pygame.Rect(0, 0, label.get_width() + 20, label.get_height() + 8)
    pill.topleft = (int(x + caption.get_width() + 12), y - 4)
    pygame.draw.rect(screen, _mix(colors.PANEL, phase_color(phase), 0.25), pill, border_radius=pill.height // 2)
    screen.blit(label, (pill.left + 10, pill.top + 4))

    if is_firing:
        pygame.draw.circle(screen, colors.FIRING, (pill.right + 14, pill.centery), 6)


def _glow(screen: pygame.Surface, pos: tuple[float, float], color: tuple, radius: int) -> None:
    # poor man's blur: stacked translucent discs
    size = radius * 4
    glow = pygame.Surface((size, size), pygame.SRCALPHA)
    for i in range(4, 0, -1):
        alpha = int(255 / (i + 1))
        pygame.draw.circle(glow, (*color, alpha), (size // 2, size // 2), radius // 2 + i * radius // 4)
    screen.blit(glow, (int(pos[0] - size / 2), int(pos[1] - size / 2)))


def draw_synapse(screen: pygame.Surface, rect: pygame.Rect, view: SceneAnimator, is_firing: bool) -> None:
    pygame.draw.rect(screen, colors.CANVAS, rect)

    mid_y = rect.centery
    pre_end = (rect.left + rect.width * 0.45, mid_y)
    post_start = (rect.left + rect.width * 0.55, mid_y)

    # postsynaptic soma + dendrite
    post_col = _mix(colors.NEURON, colors.EPSP, view.effect.value)
    pygame.draw.circle(screen, post_col, (int(post_start[0]), int(mid_y)), NEURON_R)
    pygame.draw.line(screen, post_col, (post_start[0] + NEURON_R, mid_y), (rect.right, mid_y), 4)

    # transmitter particles drift across the cleft while the response rises
    t = view.effect.value
    ctrl = (pre_end[0] + (post_start[0] - pre_end[0]) / 2.0, mid_y - 40.0)
    for p in view.particles.values():
        x, y = quad_bezier(pre_end, ctrl, post_start, t)
        r = int(round(4 * (1.0 - t)))
        if r > 0:
            pygame.draw.circle(screen, colors.TRANSMITTER, (int(x + p.jitter_x), int(y + p.jitter_y)), r)

    # presynaptic axon + terminal
    pygame.draw.line(screen, colors.NEURON, (rect.left, mid_y), (pre_end[0] - NEURON_R, mid_y), 4)
    pygame.draw.circle(screen, colors.NEURON, (int(pre_end[0]), int(mid_y)), NEURON_R)

    if is_firing:
        px = lerp(rect.left, pre_end[0], view.progress.value)
        _glow(screen, (px, mid_y), colors.PULSE, 20)


def draw_graph(screen: pygame.Surface, rect: pygame.Rect, history: list[float] | tuple[float, ...]) -> None:
    pygame.draw.rect(screen, colors.GRAPH_BG, rect)
    if len(history) < 2:
        return

    step = rect.width / (len(history) - 1)
    points = [(rect.left + i * step, voltage_to_y(v, rect)) for i, v in enumerate(history)]
    pygame.draw.lines(screen, colors.TRACE, False, points, 2)


def _dashed_hline(screen: pygame.Surface, color: tuple, x0: int, x1: int, y: int, dash: int = 5) -> None:
    x = x0
    while x < x1:
        pygame.draw.line(screen, color, (x, y), (min(x + dash, x1), y), 1)
        x += dash * 2


def draw_graph_overlay(
    screen: pygame.Surface,
    rect: pygame.Rect,
    voltage: float,
    phase: Phase,
    threshold: float = config.THRESHOLD_POTENTIAL,
) -> None:
    y = int(voltage_to_y(threshold, rect))
    _dashed_hline(screen, colors.THRESHOLD, rect.left, rect.right, y)
    label = _font(18).render(f"Threshold ({int(threshold)} mV)", True, colors.THRESHOLD)
    screen.blit(label, (rect.left + 6, y - label.get_height() - 4))

    readout = _font(36).render(f"{int(voltage)} mV", True, phase_color(phase))
    box = readout.get_rect().inflate(16, 12)
    box.topleft = (rect.left + 6, rect.top + 6)
    pygame.draw.rect(screen, colors.PANEL, box, border_radius=8)
    screen.blit(readout, (box.left + 8, box.top + 6))


def draw_button(screen: pygame.Surface, button: Button, fill: tuple | None = None) -> None:
    if not button.enabled:
        pygame.draw.rect(screen, colors.BUTTON_DISABLED, button.rect, border_radius=8)
        col = colors.TEXT_DIM
    elif fill is not None:
        pygame.draw.rect(screen, fill, button.rect, border_radius=8)
        col = colors.BG
    else:
        pygame.draw.rect(screen, colors.BUTTON_OUTLINE, button.rect, width=2, border_radius=8)
        col = colors.TEXT

    txt = _font(26).render(button.label, True, col)
    screen.blit(txt, txt.get_rect(center=button.rect.center))


def draw_controls(
    screen: pygame.Surface,
    rect: pygame.Rect,
    slider: Slider,
    fire: Button,
    reset: Button,
    threshold: float = config.THRESHOLD_POTENTIAL,
) -> None:
    pygame.draw.rect(screen, colors.PANEL, rect)
    accent = stimulus_color(slider.value, threshold)

    label = _font(26).render(f"Stimulus Strength: {int(slider.value)}", True, colors.TEXT)
    _blit_centered(screen, label, rect.centerx, rect.top + 16)

    track = slider.rect
    pygame.draw.rect(screen, colors.SLIDER_TRACK, track, border_radius=4)
    filled = pygame.Rect(track.left, track.top, slider.knob_x - track.left, track.height)
    pygame.draw.rect(screen, accent, filled, border_radius=4)
    pygame.draw.circle(screen, colors.TEXT, (slider.knob_x, track.centery), 11)

    caption = _font(18).render("Simulates the combined strength of incoming signals.", True, colors.TEXT_DIM)
    _blit_centered(screen, caption, rect.centerx, track.bottom + 16)

    draw_button(screen, fire, fill=accent)
    draw_button(screen, reset)


def draw_debug(screen: pygame.Surface, snap: Snapshot, stats: dict) -> None:
    font = _font(18)

    lines = [
        f"t={stats.get('sim_time', 0.0):.2f}s  sequences={stats.get('sequences', 0)}",
        f"phase={snap.phase.label} firing={snap.is_firing} V={snap.voltage:.1f}",
        f"progress={snap.progress:.1f} transmitters={snap.transmitter_count} effect={snap.effect.name}",
    ]

    y = HEADER_H + 8
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, (screen.get_width() - txt.get_width() - 10, y))
        y += 16


def draw_scene(
    screen: pygame.Surface,
    layout: Layout,
    snap: Snapshot,
    view: SceneAnimator,
    slider: Slider,
    fire: Button,
    reset: Button,
    threshold: float = config.THRESHOLD_POTENTIAL,
) -> None:
    screen.fill(colors.BG)
    draw_header(screen, layout.header, snap.phase, snap.is_firing)
    draw_synapse(screen, layout.canvas, view, snap.is_firing)
    draw_graph(screen, layout.graph, snap.history)
    draw_graph_overlay(screen, layout.graph, view.voltage.value, snap.phase, threshold)
    draw_controls(screen, layout.controls, slider, fire, reset, threshold)
