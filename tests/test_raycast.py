import pytest

from cubengine.image import Image
from cubengine.player import Player
from cubengine.raycast import (
    DEFAULT_SKY_COLOR,
    Ray,
    choose_texture,
    parse_texture_path,
    ray_dist,
    ray_measure,
    rgb_str_to_int,
    side_ray,
    sky_floor,
    strip_whitespace,
    wall_span,
)

TEXTURES = {"north": "N", "south": "S", "east": "E", "west": "W"}


def _player():
    return Player(pos_x=2.5, pos_y=3.25, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)


def test_ray_measure_centre_column_is_view_direction():
    p = _player()
    ray = ray_measure(p, 320, 640)
    assert (ray.ray_dir_x, ray.ray_dir_y) == pytest.approx((p.dir_x, p.dir_y))


def test_ray_measure_left_edge():
    p = _player()
    ray = ray_measure(p, 0, 640)
    assert (ray.ray_dir_x, ray.ray_dir_y) == pytest.approx((p.dir_x - p.plane_x, p.dir_y - p.plane_y))


def test_ray_dist_zero_direction_is_far():
    p = _player()
    ray = Ray(ray_dir_x=-2.0, ray_dir_y=0.0)
    ray_dist(p, ray)
    assert (ray.map_x, ray.map_y) == (2, 3)
    assert ray.delta_dist_x == pytest.approx(0.5)
    assert ray.delta_dist_y == 1e30


def test_side_ray_steps_and_distances():
    p = _player()
    ray = Ray(ray_dir_x=-1.0, ray_dir_y=1.0)
    ray_dist(p, ray)
    side_ray(p, ray)
    assert (ray.step_x, ray.step_y) == (-1, 1)
    assert ray.side_dist_x == pytest.approx((p.pos_x - ray.map_x) * ray.delta_dist_x)
    assert ray.side_dist_y == pytest.approx((ray.map_y + 1.0 - p.pos_y) * ray.delta_dist_y)


@pytest.mark.parametrize("text", ["255,182,193", "C 255,182,193", "F  255, 182, 193\n"])
def test_rgb_str_to_int(text):
    assert rgb_str_to_int(text) == DEFAULT_SKY_COLOR


def test_rgb_str_to_int_missing_parts():
    assert rgb_str_to_int("abc") == 0


def test_wall_span_at_unit_distance_fills_screen():
    assert wall_span(1.0, 480) == (0, 479)


def test_wall_span_clamps_tiny_distances():
    assert wall_span(0.0, 480) == wall_span(0.05, 480)


@pytest.mark.parametrize("dist", [1.5, 2.0, 7.3, 40.0])
def test_wall_span_within_screen(dist):
    start, end = wall_span(dist, 480)
    assert 0 <= start <= end <= 479
    assert start + end == 480


def test_wall_span_shrinks_with_distance():
    assert wall_span(2.0, 480)[0] < wall_span(4.0, 480)[0]


def test_sky_floor_fills_above_and_below():
    image = Image(4, 10)
    sky_floor(image, 1, 3, 6, "10,20,30", "40,50,60")
    column = [image.get_pixel(1, y) for y in range(10)]
    sky = rgb_str_to_int("10,20,30")
    ground = rgb_str_to_int("40,50,60")
    assert column[:3] == [sky] * 3
    assert column[3:7] == [0] * 4
    assert column[7:] == [ground] * 3
    assert all(image.get_pixel(0, y) == 0 for y in range(10))


def test_sky_floor_default_colours():
    image = Image(2, 4)
    sky_floor(image, 0, 1, 1, None, None)
    assert image.get_pixel(0, 0) == DEFAULT_SKY_COLOR
    assert image.get_pixel(0, 3) == DEFAULT_SKY_COLOR
    assert image.get_pixel(0, 1) == 0


def test_sky_floor_out_of_range_column_is_ignored():
    image = Image(2, 4)
    sky_floor(image, 5, 2, 2, None, None)
    assert bytes(image.data) == bytes(len(image.data))


@pytest.mark.parametrize(
    "side, dx, dy, expected",
    [(0, 1.0, 0.0, "E"), (0, -1.0, 0.0, "W"), (1, 0.0, 1.0, "S"), (1, 0.0, -1.0, "N")],
)
def test_choose_texture(side, dx, dy, expected):
    assert choose_texture(side, Ray(ray_dir_x=dx, ray_dir_y=dy), TEXTURES) == expected


def test_strip_whitespace():
    assert strip_whitespace("  path.xpm \t\r\n") == "  path.xpm"
    assert strip_whitespace(None) is None


def test_parse_texture_path():
    assert parse_texture_path("NO   ./textures/north.xpm \n", "NO ") == "./textures/north.xpm"


def test_parse_texture_path_without_prefix():
    assert parse_texture_path("  ./a.xpm\n", "SO ") == "./a.xpm"
    assert parse_texture_path(None, "SO ") is None