# comet.py

import logging
import math
from dataclasses import dataclass

import numba
import numpy as np

import constants
from vector import Vec2, clamp, lerp

logger = logging.getLogger("comet_sim")


@dataclass(frozen=True)
class CometSizeConfig:
    """
    Size range a comet can take, keyed by its distance to the scene's
    reference point.

    Data Contract:
    - max_size: Size when sitting on the reference point (pixels).
    - min_size: Size once max_distance away or further (pixels).
    - max_distance: Distance at which size saturates at min_size. Must be > 0.
    """
    max_size: float
    min_size: float
    max_distance: float

    def __post_init__(self):
        if self.max_distance <= 0:
            raise ValueError(f"max_distance must be positive, got {self.max_distance}")
        if self.max_size < 0 or self.min_size < 0:
            raise ValueError(f"Comet sizes must be non-negative, got max={self.max_size}, min={self.min_size}")

    @classmethod
    def from_dict(cls, config: dict):
        return cls(
            max_size=float(config['max_size']),
            min_size=float(config['min_size']),
            max_distance=float(config['max_distance']),
        )


# --- JIT-Compiled Tail Geometry ---
# Kept outside the Comet class and working on plain NumPy arrays so Numba can
# compile it in nopython mode.

@numba.jit(nopython=True, fastmath=True)
def _tail_quads_jit(start_left, start_right, end_left, end_right, segments, tail_size_scale):
    """
    Splits the tapered tail outline into `segments` quads from base to tip.
    Each quad is (p1_left, p1_right, p2_right, p2_left). Its alpha follows a
    quadratic fade (1 - t)^2 scaled by the tail envelope, where t is the
    quad's leading edge (0 at the base).
    """
    quads = np.empty((segments, 4, 2))
    alphas = np.empty(segments)
    for i in range(segments):
        t1 = i / segments
        t2 = (i + 1) / segments
        for k in range(2):
            quads[i, 0, k] = start_left[k] + (end_left[k] - start_left[k]) * t1
            quads[i, 1, k] = start_right[k] + (end_right[k] - start_right[k]) * t1
            quads[i, 2, k] = start_right[k] + (end_right[k] - start_right[k]) * t2
            quads[i, 3, k] = start_left[k] + (end_left[k] - start_left[k]) * t2
        fade = (1.0 - t1) * (1.0 - t1)
        alphas[i] = 255.0 * fade * tail_size_scale
    return quads, alphas


class Comet:
    """
    A glowing comet head with a fading tail, travelling toward a target.

    Data Contract:
    - Inputs: start_position (Vec2-like), size (float), size_config
      (CometSizeConfig), first_target_position (Vec2-like), the scene's shared
      reference point that drives the size.
    - Outputs: Draws onto a Canvas each update.
    - Side Effects: position, size advance every visible update.
    - Invariants: total_distance only changes inside set_target. Positions are
      immutable Vec2 values, so start_position, position and target never alias.
    """
    def __init__(self, start_position, size: float, size_config: CometSizeConfig, first_target_position):
        self.start_position = Vec2(*start_position)
        self.position = Vec2(*start_position)
        self.target = self.position
        self.speed = 0.0
        self.size = size
        self.total_distance = 0.0
        self.allow_render = True

        self.size_config = size_config
        self.first_target_position = Vec2(*first_target_position)

        logger.debug(f"Comet created: pos={self.position}, size={self.size}")

    def show(self, can_show: bool):
        self.allow_render = can_show

    def set_target(self, target_position, speed: float):
        """
        Starts a new journey from wherever the comet currently is.
        """
        self.start_position = self.position
        self.target = Vec2(*target_position)
        self.speed = speed
        self.total_distance = self.target.dist(self.start_position)

        logger.debug(
            f"Comet retargeted: start={self.start_position}, target={self.target}, "
            f"speed={self.speed:.2f}, total_distance={self.total_distance:.2f}"
        )

    def distance_to_target(self) -> float:
        return self.position.dist(self.target)

    def has_arrived(self) -> bool:
        return self.distance_to_target() < constants.ARRIVAL_EPSILON

    def _velocity(self) -> Vec2:
        """
        Constant-speed cruise, then a linear slow-down once inside the
        threshold distance. The threshold shrinks with the journey so short
        hops still ease in.
        """
        to_target = self.target - self.position
        distance = to_target.mag()

        threshold_distance = min(constants.DECELERATION_DISTANCE, self.total_distance / 10)
        if distance < threshold_distance:
            if distance < constants.ARRIVAL_EPSILON:
                return Vec2(0.0, 0.0)
            return to_target.normalize() * min(self.speed, distance * constants.DECELERATION_RATE)
        return to_target.normalize() * self.speed

    def update(self, canvas):
        """
        Advances one frame and draws the comet. Does nothing while hidden.
        """
        if not self.allow_render:
            return

        # --- Motion ---
        self.position = self.position + self._velocity()

        # --- Size ---
        self.update_size()

        # --- Rendering: head last so it sits on top of the tail's base ---
        self.render_tail(canvas)
        self.render_head(canvas)

    def update_size(self):
        """
        Larger near the reference point, shrinking linearly to min_size at
        max_distance and staying there beyond it.
        """
        distance_from_first_target = self.position.dist(self.first_target_position)
        normalized_distance = min(distance_from_first_target / self.size_config.max_distance, 1)
        self.size = lerp(self.size_config.max_size, self.size_config.min_size, normalized_distance)

    def render_head(self, canvas):
        # Icy nucleus inside two halo rings
        for factor, grey in constants.HEAD_LAYERS:
            canvas.fill_circle(self.position, self.size * factor, grey)

    def journey_progress(self) -> float:
        """Fraction of the current journey already covered, clamped to [0, 1]."""
        if self.total_distance <= 0:
            return 0.0
        journey_traveled = self.start_position.dist(self.position)
        return clamp(journey_traveled / self.total_distance, 0.0, 1.0)

    def tail_size_scale(self) -> float:
        """
        Bell-shaped envelope over the journey: zero at both ends, clamped to 1
        across the middle.
        """
        return min(1.0, math.sin(self.journey_progress() * math.pi) * 1.5)

    def tail_quads(self):
        """
        Computes the tail without drawing it.

        Returns (quads, alphas) as NumPy arrays of shape (segments, 4, 2) and
        (segments,), or None when no tail should be drawn (stationary, no
        journey, or arrived).
        """
        if self.speed <= 0 or self.total_distance <= 0:
            return None

        to_target = self.target - self.position
        if to_target.mag() < constants.ARRIVAL_EPSILON:
            return None

        # Tail points away from the target
        direction = -to_target.normalize()
        scale = self.tail_size_scale()

        tail_length = self.size * constants.TAIL_LENGTH_FACTOR * scale
        tail_start_width = self.size * constants.TAIL_BASE_WIDTH_FACTOR * scale
        tail_end_width = self.size * constants.TAIL_TIP_WIDTH_FACTOR * scale

        tail_start = self.position + direction * (self.size * constants.TAIL_OFFSET_FACTOR)
        tail_end = tail_start + direction * tail_length

        perpendicular = direction.perpendicular()
        start_left = tail_start + perpendicular * (tail_start_width / 2)
        start_right = tail_start - perpendicular * (tail_start_width / 2)
        end_left = tail_end + perpendicular * (tail_end_width / 2)
        end_right = tail_end - perpendicular * (tail_end_width / 2)

        return _tail_quads_jit(
            np.array(start_left), np.array(start_right),
            np.array(end_left), np.array(end_right),
            constants.TAIL_SEGMENTS, scale
        )

    def render_tail(self, canvas):
        tail = self.tail_quads()
        if tail is None:
            return

        quads, alphas = tail
        for quad, alpha in zip(quads, alphas):
            canvas.fill_polygon([(float(x), float(y)) for x, y in quad], (*constants.TAIL_COLOR, float(alpha)))
