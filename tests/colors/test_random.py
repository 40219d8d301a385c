from octarine import Color, ColorWheel, random_color, random_within, random_colors
from octarine.colors import random as color_random
import numpy as np
import pytest


def test_random_color_in_range():
    rng = np.random.default_rng(0)
    for _ in range(200):
        color = Color.random(rng)
        assert all(0 <= c <= 255 for c in color.to_rgb())

def test_random_color_is_reproducible_with_seeded_rng():
    a = random_color(np.random.default_rng(42))
    b = random_color(np.random.default_rng(42))
    assert a == b

def test_default_generator_can_be_seeded():
    color_random.seed(123)
    a = Color.random()
    color_random.seed(123)
    b = Color.random()
    assert a == b

def test_random_within_respects_bounds():
    rng = np.random.default_rng(1)
    bounds = ((10, 20), (0, 0), (200, 255))
    for _ in range(500):
        r, g, b = Color.random_within(bounds, rng).to_rgb()
        assert 10 <= r <= 20
        assert g == 0
        assert 200 <= b <= 255

def test_random_within_bounds_are_inclusive():
    rng = np.random.default_rng(2)
    seen = {random_within(((0, 1), (0, 0), (0, 0)), rng).red for _ in range(200)}
    assert seen == {0, 1}

@pytest.mark.parametrize("bounds", [
    ((20, 10), (0, 0), (0, 0)),
    ((0, 256), (0, 0), (0, 0)),
    ((-1, 5), (0, 0), (0, 0)),
    ((0, 1), (0, 1)),
    ((0, 1, 2), (0, 1), (0, 1)),
])
def test_random_within_rejects_bad_bounds(bounds):
    with pytest.raises(ValueError):
        random_within(bounds)

def test_random_colors_batch():
    colors = random_colors(50, ((100, 110), (0, 255), (5, 5)), rng=np.random.default_rng(4))
    assert len(colors) == 50
    assert all(100 <= c.red <= 110 and c.blue == 5 for c in colors)
    assert random_colors(0) == []
    with pytest.raises(ValueError):
        random_colors(-1)

def test_color_wheel_advances_hue():
    wheel = ColorWheel(rng=np.random.default_rng(9))
    for _ in range(50):
        previous = wheel.phase
        color = next(wheel)
        step = (wheel.phase - previous) % 360
        assert 36.0 <= step <= 72.0
        _, s, v = color.to_hsv()
        assert s == pytest.approx(1.0)
        assert v == pytest.approx(0.8, abs=1 / 255)

def test_color_wheel_take_matches_next():
    a = ColorWheel(rng=np.random.default_rng(9)).take(10)
    wheel = ColorWheel(rng=np.random.default_rng(9))
    assert a == [next(wheel) for _ in range(10)]

def test_color_wheel_follows_reseeded_default():
    first = ColorWheel()
    second = ColorWheel()
    color_random.seed(7)
    a = first.take(5)
    color_random.seed(7)
    b = second.take(5)
    assert a == b

def test_color_wheel_start_wraps():
    assert ColorWheel(start=400.0).phase == pytest.approx(40.0)
    assert ColorWheel(start=-90.0).phase == pytest.approx(270.0)

def test_color_wheel_is_an_iterator():
    wheel = ColorWheel(rng=np.random.default_rng(1))
    assert iter(wheel) is wheel
    assert isinstance(next(wheel), Color)
