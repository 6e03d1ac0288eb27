"""
Scroll offset sequencing for the framed scrolling animation.

Every motion model turns a scrollable distance into an ordered list of
integer vertical offsets, one per animation frame at ``FPS``. All models
share the same framing:

- ``PAUSE_FRAMES`` frames held at offset 0 before any motion
- ``PAUSE_FRAMES`` frames held at the bottom after motion ends
- content that does not scroll yields ``STATIC_FRAMES`` zero offsets

Models:

- ``CONSTANT``: linear scroll at a target pixels-per-frame, duration clamped
  to the speed tier's min/max bounds
- ``UNCAPPED``: same as ``CONSTANT`` without the upper bound, so long pages
  keep the same on-screen speed
- ``SWIPE``: discrete eased swipes separated by short holds, cycling through
  a swipe pattern

The functions here are pure and total over non-negative inputs.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

FPS = 30
STATIC_FRAMES = 180
PAUSE_FRAMES = 30
MIN_SCROLL_FRAMES = 2


class MotionModel(str, Enum):
    CONSTANT = "constant"
    UNCAPPED = "uncapped"
    SWIPE = "swipe"


@dataclass(frozen=True)
class SpeedTier:
    """Target speed and total duration bounds (frames, pauses included)."""
    target_ppf: float
    min_frames: int
    max_frames: int

    def __post_init__(self):
        if self.target_ppf <= 0:
            raise ValueError(f"target_ppf must be positive, got {self.target_ppf}")
        if self.max_frames < self.min_frames:
            raise ValueError(
                f"max_frames ({self.max_frames}) is below min_frames ({self.min_frames})"
            )


@dataclass(frozen=True)
class SwipeStep:
    """One gesture: scroll ``distance_factor`` viewports over ``swipe_frames``, then hold."""
    distance_factor: float
    swipe_frames: int
    pause_frames: int

    def __post_init__(self):
        if self.distance_factor <= 0:
            raise ValueError(f"distance_factor must be positive, got {self.distance_factor}")
        if self.swipe_frames < 1:
            raise ValueError(f"swipe_frames must be at least 1, got {self.swipe_frames}")
        if self.pause_frames < 0:
            raise ValueError(f"pause_frames cannot be negative, got {self.pause_frames}")


SPEED_TIERS: Dict[str, SpeedTier] = {
    "slow": SpeedTier(target_ppf=15, min_frames=180, max_frames=360),
    "normal": SpeedTier(target_ppf=21.5, min_frames=150, max_frames=270),
    "fast": SpeedTier(target_ppf=30, min_frames=90, max_frames=180),
}

DEFAULT_SWIPE_PATTERN: Tuple[SwipeStep, ...] = (
    SwipeStep(distance_factor=0.85, swipe_frames=20, pause_frames=24),
    SwipeStep(distance_factor=1.2, swipe_frames=26, pause_frames=36),
    SwipeStep(distance_factor=0.6, swipe_frames=16, pause_frames=18),
)


@dataclass(frozen=True)
class MotionConfig:
    """Everything a motion model may read; each model uses only its own part."""
    speed: SpeedTier = SPEED_TIERS["normal"]
    swipe_pattern: Tuple[SwipeStep, ...] = field(default=DEFAULT_SWIPE_PATTERN)

    def __post_init__(self):
        if not self.swipe_pattern:
            raise ValueError("swipe_pattern must contain at least one step")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - ((-2 * t + 2) ** 3) / 2


def _static_sequence() -> List[int]:
    return [0] * STATIC_FRAMES


def _framed(motion: List[int], scrollable: int) -> List[int]:
    return [0] * PAUSE_FRAMES + motion + [scrollable] * PAUSE_FRAMES


def _scroll_frames(scrollable: int, tier: SpeedTier, capped: bool) -> int:
    ideal = math.ceil(scrollable / tier.target_ppf) + 1
    frames = max(tier.min_frames - 2 * PAUSE_FRAMES, ideal)
    if capped:
        frames = min(tier.max_frames - 2 * PAUSE_FRAMES, frames)
    return max(MIN_SCROLL_FRAMES, frames)


def _linear_motion(scrollable: int, scroll_frames: int) -> List[int]:
    last = scroll_frames - 1
    return [round_half_up(i / last * scrollable) for i in range(scroll_frames)]


def compute_frame_count(scrollable: int, tier: SpeedTier, capped: bool = True) -> int:
    """Total frames (pauses included) the linear models render for ``scrollable`` pixels."""
    if scrollable <= 0:
        return STATIC_FRAMES
    return _scroll_frames(scrollable, tier, capped) + 2 * PAUSE_FRAMES


def constant_speed_offsets(scrollable: int, viewport_height: int, config: MotionConfig) -> List[int]:
    """Linear scroll whose duration is clamped to the tier's bounds."""
    if scrollable <= 0:
        return _static_sequence()
    frames = _scroll_frames(scrollable, config.speed, capped=True)
    return _framed(_linear_motion(scrollable, frames), scrollable)


def uncapped_speed_offsets(scrollable: int, viewport_height: int, config: MotionConfig) -> List[int]:
    """Linear scroll with only a minimum duration; long pages take longer."""
    if scrollable <= 0:
        return _static_sequence()
    frames = _scroll_frames(scrollable, config.speed, capped=False)
    return _framed(_linear_motion(scrollable, frames), scrollable)


def swipe_offsets(scrollable: int, viewport_height: int, config: MotionConfig) -> List[int]:
    """Human-like scrolling: eased swipes separated by holds, cycling the pattern."""
    if scrollable <= 0:
        return _static_sequence()

    pattern = config.swipe_pattern
    motion: List[int] = []
    current_y = 0
    step_index = 0

    while current_y < scrollable:
        step = pattern[step_index % len(pattern)]
        step_index += 1

        start_y = current_y
        actual = min(viewport_height * step.distance_factor, scrollable - current_y)

        for i in range(step.swipe_frames):
            t = i / (step.swipe_frames - 1) if step.swipe_frames > 1 else 1.0
            motion.append(round_half_up(start_y + actual * ease_in_out_cubic(t)))

        advance = max(1, round_half_up(actual))
        current_y = min(current_y + advance, scrollable)

        if current_y < scrollable:
            motion.extend([current_y] * step.pause_frames)

    return _framed(motion, scrollable)


MotionStrategy = Callable[[int, int, MotionConfig], List[int]]

MOTION_STRATEGIES: Dict[MotionModel, MotionStrategy] = {
    MotionModel.CONSTANT: constant_speed_offsets,
    MotionModel.UNCAPPED: uncapped_speed_offsets,
    MotionModel.SWIPE: swipe_offsets,
}


def compute_offsets(
    model: MotionModel,
    scrollable: int,
    viewport_height: int,
    config: MotionConfig = MotionConfig(),
) -> List[int]:
    """
    Compute the per-frame vertical offsets for ``model``.

    Args:
        model: Motion model to use
        scrollable: Scrollable distance, ``max(0, content_height - viewport_height)``
        viewport_height: Visible screen height in content pixels
        config: Speed tier and swipe pattern

    Returns:
        One offset per frame, each within ``[0, scrollable]``
    """
    return MOTION_STRATEGIES[MotionModel(model)](scrollable, viewport_height, config)


def describe_sequence(offsets: Sequence[int], fps: int = FPS) -> Dict[str, float]:
    """Duration and average speed of a sequence, for logging."""
    frames = len(offsets)
    moving = sum(1 for a, b in zip(offsets, offsets[1:]) if b != a)
    distance = offsets[-1] - offsets[0] if offsets else 0
    return {
        'frames': frames,
        'duration_seconds': frames / fps if fps else 0.0,
        'distance': distance,
        'pixels_per_moving_frame': distance / moving if moving else 0.0,
    }
