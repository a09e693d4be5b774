"""Frame generation loop: schedule -> rasterize -> GIF sink, in index order."""
import logging
from pathlib import Path
from typing import Optional

from gradient_loop.colors import RGB, format_rgb
from gradient_loop.config import AnimationParams
from gradient_loop.raster import render_frame
from gradient_loop.schedule import iter_progress
from gradient_loop.sink import GifSink, Target

logger = logging.getLogger(__name__)


def generate(params: AnimationParams, color1: RGB, color2: RGB, target: Optional[Target] = None):
    """Render the full animation into `target` (defaults to params.output_name).

    Returns the target written. Any error aborts the run; a partially written
    file may be left behind.
    """
    params.validate()
    if target is None:
        target = Path(params.output_name)

    total = params.total_frames
    delay = params.delay
    logger.info(
        f"Rendering {total} frames {params.width}x{params.height} "
        f"{format_rgb(color1)} -> {format_rgb(color2)} at {params.frame_rate} fps (delay {delay}cs)"
    )

    with GifSink(target, params.width, params.height) as sink:
        for i, progress in iter_progress(total):
            frame = render_frame(color1, color2, params.width, params.height, progress)
            sink.write_frame(frame, delay)
            if (i + 1) % params.frame_rate == 0:
                logger.debug(f"Rendered {i + 1}/{total} frames")

    logger.info(f"Wrote {sink.frames_written} frames to {target}")
    return target
