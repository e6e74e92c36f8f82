# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from canvas import PygameCanvas
from comet import CometSizeConfig
from comet_field import CometField

# Get the application's dedicated logger
logger = logging.getLogger("comet_sim")


def draw_frame(field, screen, trail_surface):
    """
    Renders one frame: fade the previous frame, bloom pass, then the sharp pass.
    The field is advanced during the glow pass only, so comets move once per frame.
    """
    trail_surface.fill(constants.TRAIL_EFFECT_COLOR)
    screen.blit(trail_surface, (0, 0))

    glow_surface = pygame.Surface((constants.WIDTH, constants.HEIGHT), pygame.SRCALPHA)
    field.update(PygameCanvas(glow_surface))

    scale = constants.BLOOM_RADIUS
    scaled_size = (constants.WIDTH // scale, constants.HEIGHT // scale)
    scaled_surface = pygame.transform.smoothscale(glow_surface, scaled_size)
    blurred_surface = pygame.transform.smoothscale(scaled_surface, (constants.WIDTH, constants.HEIGHT))

    intensity = constants.BLOOM_INTENSITY
    blurred_surface.fill((intensity, intensity, intensity), special_flags=pygame.BLEND_RGB_MULT)
    screen.blit(blurred_surface, (0, 0), special_flags=pygame.BLEND_RGB_ADD)

    # Sharp pass: the glow surface already holds this frame's comets
    screen.blit(glow_surface, (0, 0))


def run_loop(field, screen, clock, sim_config):
    running = True
    tick = 0
    accumulated_retargets = 0
    max_ticks = sim_config.get('max_ticks', 0)
    log_interval = sim_config.get('log_interval', 100)

    trail_surface = pygame.Surface((constants.WIDTH, constants.HEIGHT), pygame.SRCALPHA)

    while running and (max_ticks == 0 or tick < max_ticks):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    field.set_visible(field.count_visible() == 0)

        draw_frame(field, screen, trail_surface)
        accumulated_retargets += field.retargets_this_tick

        # --- Logging (throttled) ---
        if tick % log_interval == 0:
            logger.debug(
                f"Tick={tick}, "
                f"Visible={field.count_visible()}, "
                f"InTransit={field.count_in_transit()}, "
                f"Retargets={accumulated_retargets}, "
                f"FPS={clock.get_fps():.1f}"
            )
            accumulated_retargets = 0

        pygame.display.flip()
        clock.tick(constants.FPS)
        tick += 1

    return tick


def main():
    """
    Initializes the comet field and runs it until the window is closed.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    size_config = CometSizeConfig.from_dict(config['comet_size'])

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    field = CometField(
        config=config['field'],
        size_config=size_config,
        rng=rng,
        bounds=(constants.WIDTH, constants.HEIGHT)
    )

    ticks = run_loop(field, screen, clock, config.get('simulation', {}))

    logger.info(f"Application shutting down after {ticks} ticks.")
    pygame.quit()

if __name__ == "__main__":
    main()
