"""
Interactive neuron: stimulate, watch the action potential travel, and see the
synapse respond.
"""

from __future__ import annotations
import logging
import pygame

import config
from membrane.neuron import Neuron
from render.animation import SceneAnimator
from render.renderer import Layout, draw_debug, draw_scene
from render.widgets import Button, Slider

logger = logging.getLogger(__name__)


def build_controls(layout: Layout) -> tuple[Slider, Button, Button]:
    slider = Slider(
        rect=layout.slider_rect(),
        min_value=config.STIMULUS_MIN,
        max_value=config.STIMULUS_MAX,
        step=config.STIMULUS_STEP,
        value=config.STIMULUS_DEFAULT,
    )
    fire = Button(rect=layout.fire_button_rect(), label="Fire Neuron")
    reset = Button(rect=layout.reset_button_rect(), label="Reset")
    return slider, fire, reset


def handle_event(
    e: pygame.event.Event,
    neuron: Neuron,
    view: SceneAnimator,
    slider: Slider,
    fire: Button,
    reset: Button,
) -> None:
    slider.handle_event(e)

    if fire.handle_event(e):
        neuron.apply_stimulus(slider.value)
    elif reset.handle_event(e):
        neuron.reset()
        view.snap_to(neuron.snapshot())
    elif e.type == pygame.KEYDOWN:
        if e.key == pygame.K_SPACE:
            neuron.apply_stimulus(slider.value)
        elif e.key == pygame.K_r:
            neuron.reset()
            view.snap_to(neuron.snapshot())
        elif e.key == pygame.K_LEFT:
            slider.nudge(-1)
        elif e.key == pygame.K_RIGHT:
            slider.nudge(1)


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("synapse_sim (Neuron Communication)")
    clock = pygame.time.Clock()

    layout = Layout.for_screen(config.SCREEN_W, config.SCREEN_H)
    slider, fire, reset = build_controls(layout)

    neuron = Neuron()
    view = SceneAnimator.from_snapshot(neuron.snapshot())
    neuron.subscribe(view)

    debug = False
    running = True
    logger.info("ready: threshold %.1f mV, stimulus %.0f", neuron.threshold_potential, slider.value)

    while running:
        dt = clock.tick(config.FPS) / 1000.0
        # a stalled frame should not skip whole phases on screen
        dt = min(dt, 1 / 30)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_TAB:
                debug = not debug
            else:
                handle_event(e, neuron, view, slider, fire, reset)

        neuron.update(dt)
        view.update(dt)
        fire.enabled = not neuron.is_firing

        snap = neuron.snapshot()
        draw_scene(screen, layout, snap, view, slider, fire, reset, neuron.threshold_potential)
        if debug:
            stats = {
                "sim_time": neuron.sequencer.now,
                "sequences": len(neuron.sequencer),
            }
            draw_debug(screen, snap, stats)

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
