# comet_field.py

import logging

import numpy as np

import constants
from comet import Comet, CometSizeConfig
from vector import Vec2

logger = logging.getLogger("comet_sim")


class CometField:
    """
    Drives a set of independent comets across the screen.

    Owns the shared reference point every comet sizes itself against, and
    hands each comet a fresh random journey whenever it arrives.

    Data Contract:
    - Inputs:
        - config (dict): The 'field' block of config.json.
        - size_config (CometSizeConfig): Size range shared by all comets.
        - rng (np.random.Generator): Source of all randomness in the field.
        - bounds (tuple): (width, height) of the drawing area in pixels.
    - Outputs: None. Draws onto the canvas passed to update().
    - Side Effects: Mutates the comets it owns.
    - Invariants: Comets never read or affect one another. The number of
      comets is constant. Targets are always inside bounds shrunk by margin.
    """
    def __init__(self, config: dict, size_config: CometSizeConfig, rng: np.random.Generator, bounds: tuple):
        self.config = config
        self.size_config = size_config
        self.rng = rng
        self.bounds = np.array(bounds, dtype=float)
        self.min_speed = config['min_speed']
        self.max_speed = config['max_speed']
        self.margin = config.get('margin', 0)

        if self.min_speed <= 0 or self.max_speed < self.min_speed:
            raise ValueError(f"Invalid speed range [{self.min_speed}, {self.max_speed}]")
        if self.max_speed > constants.DECELERATION_DISTANCE:
            # Faster than the slow-down zone is deep, a comet can step over it and oscillate
            raise ValueError(f"max_speed must not exceed {constants.DECELERATION_DISTANCE}, got {self.max_speed}")
        if self.margin * 2 >= min(self.bounds):
            raise ValueError(f"Margin {self.margin} leaves no room inside bounds {tuple(self.bounds)}")

        # Default reference point is the centre of the screen
        first_target = config.get('first_target', self.bounds / 2)
        self.first_target_position = Vec2(*first_target)

        # --- Per-tick statistics for throttled logging ---
        self.retargets_this_tick = 0

        self.comets = []
        for _ in range(config['comet_count']):
            comet = Comet(self._random_point(), size_config.min_size, size_config, self.first_target_position)
            comet.set_target(self._random_target(comet.position), self._random_speed())
            self.comets.append(comet)

        logger.info(f"CometField created with {len(self.comets)} comets.")
        logger.info(f"Reference point: {self.first_target_position}, size config: {size_config}")

    def _random_point(self) -> Vec2:
        low = np.full(2, self.margin)
        high = self.bounds - self.margin
        return Vec2(*self.rng.uniform(low, high))

    def _random_target(self, origin: Vec2) -> Vec2:
        """
        Picks a point at least MIN_JOURNEY_DISTANCE away from origin, so every
        journey has the full slow-down zone in front of its target.
        """
        target = self._random_point()
        for _ in range(constants.TARGET_SAMPLE_ATTEMPTS):
            if target.dist(origin) >= constants.MIN_JOURNEY_DISTANCE:
                return target
            target = self._random_point()
        logger.warning(f"No target at least {constants.MIN_JOURNEY_DISTANCE}px from {origin}; using {target}")
        return target

    def _random_speed(self) -> float:
        return float(self.rng.uniform(self.min_speed, self.max_speed))

    def set_visible(self, visible: bool):
        for comet in self.comets:
            comet.show(visible)
        logger.info(f"Comets {'shown' if visible else 'hidden'}.")

    def update(self, canvas):
        """
        Advances and draws every comet for one frame, then sends arrived
        comets off on a new journey.
        """
        self.retargets_this_tick = 0
        for comet in self.comets:
            comet.update(canvas)
            if comet.allow_render and comet.has_arrived():
                comet.set_target(self._random_target(comet.position), self._random_speed())
                self.retargets_this_tick += 1

    def count_visible(self) -> int:
        return sum(1 for comet in self.comets if comet.allow_render)

    def count_in_transit(self) -> int:
        return sum(1 for comet in self.comets if not comet.has_arrived())
