"""Tests for animation parameters and frame-rate derived values."""
import argparse

import pytest

from gradient_loop import config
from gradient_loop.config import AnimationParams, frame_delay
from gradient_loop.errors import InvalidParameter


def test_defaults_at_30_fps():
    params = AnimationParams(width=10, height=5, duration=2).validate()
    assert params.frame_rate == 30
    assert params.total_frames == 60
    assert params.delay == 3


def test_frame_delay_rounding():
    assert frame_delay(30) == 3
    assert frame_delay(25) == 4
    assert frame_delay(100) == 1
    # 100 / 40 = 2.5 rounds up
    assert frame_delay(40) == 3


def test_frame_delay_rejects_non_positive_rate():
    with pytest.raises(InvalidParameter):
        frame_delay(0)


def test_frame_rate_can_be_overridden(monkeypatch):
    monkeypatch.setattr(config, "FRAME_RATE", 10)
    params = AnimationParams(width=4, height=4, duration=3)
    assert params.total_frames == 30
    assert params.delay == 10
    assert frame_delay() == 10


def test_output_name_embeds_dimensions_and_duration():
    assert AnimationParams(320, 64, 4).output_name == "gradient320x64_4.gif"
    assert AnimationParams(64, 320, 4).output_name != AnimationParams(320, 64, 4).output_name


@pytest.mark.parametrize("field,value", [
    ("width", 0),
    ("height", 0),
    ("duration", 0),
    ("width", -1),
    ("height", -10),
    ("duration", -2),
])
def test_non_positive_values_rejected(field, value):
    kwargs = {"width": 10, "height": 5, "duration": 2}
    kwargs[field] = value
    with pytest.raises(InvalidParameter, match=field):
        AnimationParams(**kwargs).validate()


def test_from_args_validates():
    ok = AnimationParams.from_args(argparse.Namespace(width=8, height=2, duration=1))
    assert (ok.width, ok.height, ok.duration) == (8, 2, 1)
    with pytest.raises(InvalidParameter):
        AnimationParams.from_args(argparse.Namespace(width=8, height=2, duration=0))
