"""Animated GIF output for rendered frames.

`GifSink` owns the output stream for one animation: the canvas size and loop
count are fixed when it is opened and every frame is encoded and written to
the stream as soon as it is handed over, strictly in display order.
"""
import logging
import os
from typing import BinaryIO, Optional, Union

from PIL import Image, GifImagePlugin

from gradient_loop import config
from gradient_loop.errors import (
    OutputCreateFailed,
    FrameWriteFailed,
    FrameSizeMismatch,
    InvalidParameter,
    SinkStateError,
)

logger = logging.getLogger(__name__)

Target = Union[str, os.PathLike, BinaryIO]

GIF_TRAILER = b";"


class GifSink:
    """Append-only GIF writer.

    Usage:
      with GifSink("out.gif", 320, 200) as sink:
          sink.write_frame(img, delay=3)

    open() writes the GIF header and the NETSCAPE loop extension, each
    write_frame() appends one image block with its own color table and delay,
    and close() writes the trailer. Nothing is buffered between frames, so
    identical consecutive frames stay separate frames in the file.
    """

    def __init__(self, target: Target, width: int, height: int, loop: int = config.LOOP_FOREVER):
        if width <= 0 or height <= 0:
            raise InvalidParameter(f"GIF canvas must be positive, got {width}x{height}")
        self.target = target
        self.width = width
        self.height = height
        self.loop = loop
        self.frames_written = 0
        self._fp: Optional[BinaryIO] = None
        self._owns_fp = False
        self._closed = False

    def open(self) -> "GifSink":
        if self._fp is not None or self._closed:
            raise SinkStateError("GIF sink already opened")
        if isinstance(self.target, (str, os.PathLike)):
            try:
                self._fp = open(self.target, "wb")
            except OSError as e:
                raise OutputCreateFailed(f"Cannot create output file {self.target}: {e}") from e
            self._owns_fp = True
        else:
            self._fp = self.target

        # The global table is a placeholder; every frame carries a local one
        blank = Image.new("RGB", (self.width, self.height)).convert("P", palette=Image.Palette.ADAPTIVE)
        header, _ = GifImagePlugin.getheader(blank, info={"loop": self.loop})
        try:
            self._write(header)
        except OSError as e:
            self.abort()
            raise OutputCreateFailed(f"Cannot write GIF header to {self.target}: {e}") from e
        logger.debug(f"Opened GIF sink {self.width}x{self.height} (loop={self.loop})")
        return self

    def write_frame(self, frame: Image.Image, delay: int) -> None:
        """Encode one frame shown for `delay` hundredths of a second."""
        if self._fp is None or self._closed:
            raise SinkStateError("GIF sink is not open")
        if frame.size != (self.width, self.height):
            raise FrameSizeMismatch(
                f"Frame is {frame.size[0]}x{frame.size[1]}, animation canvas is {self.width}x{self.height}"
            )
        if delay < 0:
            raise InvalidParameter(f"Frame delay must not be negative, got {delay}")

        indexed = frame.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)
        # Pillow takes milliseconds and stores hundredths
        data = GifImagePlugin.getdata(indexed, duration=delay * 10, include_color_table=True)
        try:
            self._write(data)
        except OSError as e:
            raise FrameWriteFailed(f"Failed to write frame {self.frames_written}: {e}") from e
        self.frames_written += 1

    def close(self) -> None:
        if self._closed:
            return
        if self._fp is None:
            raise SinkStateError("GIF sink was never opened")
        try:
            self._write([GIF_TRAILER])
            self._fp.flush()
            if self._owns_fp:
                self._fp.close()
            logger.debug(f"Wrote {self.frames_written} frames")
        except OSError as e:
            raise FrameWriteFailed(f"Failed to finish GIF output: {e}") from e
        finally:
            self._release()

    def abort(self) -> None:
        """Release the output without writing the trailer."""
        if self._closed:
            return
        self._release()

    def _write(self, chunks) -> None:
        for chunk in chunks:
            self._fp.write(chunk)

    def _release(self) -> None:
        self._closed = True
        if self._owns_fp and self._fp is not None and not self._fp.closed:
            try:
                self._fp.close()
            except OSError:
                logger.debug("Closing GIF output failed", exc_info=True)

    def __enter__(self) -> "GifSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.close()
        else:
            self.abort()
        return False
