from octarine import Color
from octarine.colors import add, subtract, multiply, divide, scale
import pytest
import warnings


def test_addition():
    assert Color.from_hex(0xFF9999) + Color(10, 10, 10) == Color(255, 163, 163)
    assert Color.from_hex(0xAAFFCC) + Color(10, 10, 10) == Color(180, 255, 214)

def test_addition_clamps():
    assert Color(250, 250, 250) + Color(10, 10, 10) == Color(255, 255, 255)
    assert add(Color(255, 255, 255), Color(255, 255, 255)) == Color(255, 255, 255)

def test_subtraction_clamps():
    assert Color.from_hex(0xFF9999) - Color(10, 10, 10) == Color(245, 143, 143)
    assert Color.from_hex(0xAAFFCC) - Color(10, 10, 10) == Color(160, 245, 194)
    assert Color(5, 5, 5) - Color(10, 0, 20) == Color(0, 5, 0)
    assert subtract(Color(0, 0, 0), Color(255, 255, 255)) == Color(0, 0, 0)

def test_multiply_colors():
    assert Color.from_hex(0xFF9999) * Color.from_hex(0xCCCCCC) == Color(204, 122, 122)
    assert Color(100, 100, 100) * Color.from_hsv(0.0, 1.0, 1.0) == Color.from_hex(0x640000)
    assert multiply(Color(255, 255, 255), Color(1, 2, 3)) == Color(1, 2, 3)

def test_multiply_by_scalar():
    assert Color(100, 150, 200) * 0.5 == Color(50, 75, 100)
    assert 2 * Color(100, 150, 200) == Color(200, 255, 255)
    assert Color(1, 1, 1) * 0.5 == Color(1, 1, 1)
    assert scale(Color(10, 20, 30), -1) == Color(0, 0, 0)

def test_divide_colors():
    assert Color.from_hex(0xFF9999) / Color(10, 10, 10) == Color(25, 15, 15)
    assert Color.from_hex(0xAAFFCC) / Color(10, 10, 10) == Color(17, 25, 20)

def test_divide_by_zero_channel_saturates_and_warns():
    with pytest.warns(RuntimeWarning):
        result = Color(10, 0, 30) / Color(0, 0, 3)
    assert result == Color(255, 0, 10)

def test_divide_without_zero_channels_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert divide(Color(9, 9, 9), Color(3, 3, 3)) == Color(3, 3, 3)

def test_divide_by_scalar():
    assert Color(100, 150, 200) / 2 == Color(50, 75, 100)
    with pytest.raises(ZeroDivisionError):
        Color(1, 2, 3) / 0

def test_unsupported_operands_raise_type_error():
    color = Color(1, 2, 3)
    with pytest.raises(TypeError):
        color + 1
    with pytest.raises(TypeError):
        color - (1, 2, 3)
    with pytest.raises(TypeError):
        color * "x"
    with pytest.raises(TypeError):
        color * True
    with pytest.raises(TypeError):
        1 / color

def test_operations_return_new_colors():
    a = Color(10, 10, 10)
    b = Color(20, 20, 20)
    a + b
    a * b
    assert a.to_rgb() == (10, 10, 10)
    assert b.to_rgb() == (20, 20, 20)

def test_saturating_add_and_blend_on_channel_arrays():
    assert Color(250, 250, 250) + Color(10, 10, 10) == Color(255, 255, 255)
    assert Color(5, 5, 5) - Color(10, 10, 10) == Color(0, 0, 0)
    assert Color(255, 0, 0).screen(Color(10, 10, 10)) == Color(255, 10, 10)
