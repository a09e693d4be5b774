"""Ping-pong progress schedule.

Progress rises linearly from 0 to 1 over the first half of the frames and falls
back toward 0 over the second half, so an infinitely looping animation plays
forward then backward without a visible seam.
"""
from typing import Iterator, Tuple

from gradient_loop.errors import InvalidParameter


def schedule_frame(frame_index: int, total_frames: int) -> float:
    if total_frames <= 0:
        raise InvalidParameter(f"total_frames must be positive, got {total_frames}")
    if not 0 <= frame_index < total_frames:
        raise InvalidParameter(f"frame index {frame_index} outside [0, {total_frames})")

    progress = (frame_index / total_frames) * 2.0
    if progress > 1.0:
        progress = 2.0 - progress
    return progress


def iter_progress(total_frames: int) -> Iterator[Tuple[int, float]]:
    """Yield (frame_index, progress) in display order."""
    if total_frames <= 0:
        raise InvalidParameter(f"total_frames must be positive, got {total_frames}")
    for i in range(total_frames):
        yield i, schedule_frame(i, total_frames)
