from octarine.conversions import (
    rgb_to_hex,
    hex_to_rgb,
    np_rgb_to_hex,
    np_hex_to_rgb,
    parse_hex_string,
    format_hex_string,
)
import numpy as np
import pytest


def test_rgb_to_hex():
    assert rgb_to_hex(100, 100, 100) == 0x646464
    assert rgb_to_hex(255, 0, 0) == 0xFF0000
    assert rgb_to_hex(0, 0, 255) == 0x0000FF

def test_hex_to_rgb():
    assert hex_to_rgb(0xFF9999) == (255, 153, 153)
    assert hex_to_rgb(0x000000) == (0, 0, 0)

def test_hex_to_rgb_ignores_high_bits():
    assert hex_to_rgb(0xAB123456) == (0x12, 0x34, 0x56)
    assert hex_to_rgb(-1) == (255, 255, 255)

def test_hex_to_rgb_rejects_floats():
    with pytest.raises(TypeError):
        hex_to_rgb(1.5)

def test_numpy_round_trip_all_bytes():
    v = np.arange(256)
    rgb = np.stack([v, v[::-1], (v * 7) % 256], axis=-1)
    packed = np_rgb_to_hex(rgb)
    assert packed[1] == rgb_to_hex(1, 254, 7)
    assert np.array_equal(np_hex_to_rgb(packed), rgb)

def test_np_rgb_to_hex_shape_check():
    with pytest.raises(ValueError):
        np_rgb_to_hex(np.zeros((4, 2)))

@pytest.mark.parametrize("text, expected", [
    ("#ff0000", 0xFF0000),
    ("FF9999", 0xFF9999),
    ("0x646464", 0x646464),
    ("#abc", 0xAABBCC),
    ("  #00Ff00 ", 0x00FF00),
])
def test_parse_hex_string(text, expected):
    assert parse_hex_string(text) == expected

@pytest.mark.parametrize("text", ["", "#", "#12", "#1234", "#gggggg", "red", "#+12345", "#12_345"])
def test_parse_hex_string_invalid(text):
    with pytest.raises(ValueError):
        parse_hex_string(text)

def test_format_hex_string():
    assert format_hex_string(0x646464) == "#646464"
    assert format_hex_string(0xABCDEF) == "#abcdef"
    assert format_hex_string(0x1000000) == "#000000"
