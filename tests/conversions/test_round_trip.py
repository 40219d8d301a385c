from octarine.conversions import (
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    unit_to_byte,
    np_unit_to_byte,
)
import numpy as np
from tests.samples import samples_rgb_hsl, samples_rgb_hsv


rgb_tolerance = 1e-9

def test_round_trip_rgb_hsl():
    for (r, g, b) in samples_rgb_hsl:
        unit = (r / 255, g / 255, b / 255)
        out = hsl_to_unit_rgb(*unit_rgb_to_hsl(*unit))
        assert np.allclose(out, unit, atol=rgb_tolerance)

def test_round_trip_rgb_hsv():
    for (r, g, b) in samples_rgb_hsv:
        unit = (r / 255, g / 255, b / 255)
        out = hsv_to_unit_rgb(*unit_rgb_to_hsv(*unit))
        assert np.allclose(out, unit, atol=rgb_tolerance)

def test_byte_round_trip_all_grays_and_random():
    # float math is exact enough that every byte survives the trip
    rng = np.random.default_rng(5)
    rgb = rng.integers(0, 255, size=(2000, 3), endpoint=True)
    rgb = np.concatenate([rgb, np.repeat(np.arange(256)[:, None], 3, axis=1)])
    unit = rgb / 255

    hsl = np_unit_rgb_to_hsl(unit[:, 0], unit[:, 1], unit[:, 2])
    back = np_hsl_to_unit_rgb(hsl[:, 0], hsl[:, 1], hsl[:, 2])
    assert np.array_equal(np_unit_to_byte(back), rgb)

    hsv = np_unit_rgb_to_hsv(unit[:, 0], unit[:, 1], unit[:, 2])
    back = np_hsv_to_unit_rgb(hsv[:, 0], hsv[:, 1], hsv[:, 2])
    assert np.array_equal(np_unit_to_byte(back), rgb)

def test_unit_to_byte_rounds_half_up():
    assert unit_to_byte(0.5) == 128
    assert unit_to_byte(0.0) == 0
    assert unit_to_byte(1.0) == 255
    assert unit_to_byte(2.0) == 255
    assert unit_to_byte(-0.5) == 0

def test_np_unit_to_byte_matches_scalar():
    values = np.array([-0.5, 0.0, 0.25, 0.5, 0.999, 1.0, 1.5])
    out = np_unit_to_byte(values)
    assert out.dtype == np.uint8
    assert out.tolist() == [unit_to_byte(v) for v in values]
