"""Animation constants and the validated parameter record used by the CLI.

Consumers read `FRAME_RATE` through this module at call time so tests can
patch it without touching the pipeline.
"""
from dataclasses import dataclass, field
from typing import Optional

from gradient_loop.errors import InvalidParameter

FRAME_RATE = 30  # frames per second

# NETSCAPE loop count; 0 repeats forever
LOOP_FOREVER = 0

OUTPUT_TEMPLATE = "gradient{width}x{height}_{duration}.gif"


def _current_frame_rate() -> int:
    return FRAME_RATE


def frame_delay(frame_rate: Optional[int] = None) -> int:
    """Per-frame delay in hundredths of a second, rounded half-up.

    30 fps gives 3 (30ms), slightly faster than the nominal 33.3ms.
    """
    rate = FRAME_RATE if frame_rate is None else frame_rate
    if rate <= 0:
        raise InvalidParameter(f"frame rate must be positive, got {rate}")
    return int(100.0 / rate + 0.5)


@dataclass
class AnimationParams:
    width: int
    height: int
    duration: int  # seconds
    frame_rate: int = field(default_factory=_current_frame_rate)

    def validate(self) -> "AnimationParams":
        for name in ("width", "height", "duration", "frame_rate"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise InvalidParameter(f"{name} must be a positive integer, got {value!r}")
        return self

    @property
    def total_frames(self) -> int:
        return self.duration * self.frame_rate

    @property
    def delay(self) -> int:
        return frame_delay(self.frame_rate)

    @property
    def output_name(self) -> str:
        return OUTPUT_TEMPLATE.format(width=self.width, height=self.height, duration=self.duration)

    @classmethod
    def from_args(cls, args) -> "AnimationParams":
        """Build from an argparse namespace carrying width, height and duration."""
        return cls(width=args.width, height=args.height, duration=args.duration).validate()
