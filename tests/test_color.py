import pytest

from cubraycaster.color import create_rgb, gen_darker_color, get_b, get_g, get_r


def test_white_is_full_mask():
    assert create_rgb(255, 255, 255) == 0xFFFFFF


@pytest.mark.parametrize(
    "rgb", [(0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255), (12, 200, 99)]
)
def test_channels_round_trip(rgb):
    r, g, b = rgb
    packed = create_rgb(r, g, b)
    assert (get_r(packed), get_g(packed), get_b(packed)) == rgb


def test_create_rgb_stays_within_24_bits():
    assert 0 <= create_rgb(1023, 1023, 1023) <= 0xFFFFFF


def test_channel_extraction_ignores_alpha():
    assert get_r(0xFF123456) == get_r(0x123456)
    assert get_b(0xFF123456) == get_b(0x123456)


def test_darker_lowers_each_channel():
    color = create_rgb(100, 50, 30)
    darker = gen_darker_color(color, 1)
    assert get_r(darker) == get_r(color) - 1
    assert get_g(darker) == get_g(color) - 1
    assert get_b(darker) == get_b(color) - 1


def test_darker_clamps_at_zero():
    color = create_rgb(3, 200, 0)
    darker = gen_darker_color(color, 5)
    assert get_r(darker) == 0
    assert get_g(darker) == 195
    assert get_b(darker) == 0


def test_darker_black_stays_black():
    assert gen_darker_color(0, 10) == 0


def test_darker_by_zero_is_identity():
    color = create_rgb(10, 20, 30)
    assert gen_darker_color(color, 0) == color