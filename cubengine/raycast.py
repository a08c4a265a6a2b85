"""Per-column ray setup, wall span, sky and floor fill, and texture choice."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, TypeVar

from .image import Image
from .player import Player

DEFAULT_SKY_COLOR = 0xFFB6C1
DEFAULT_GROUND_COLOR = 0xFFB6C1
MIN_WALL_DIST = 0.05
_FAR = 1e30
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_TRAILING = " \n\r\t"

T = TypeVar("T")


@dataclass
class Ray:
    """State of one ray cast through the map grid."""

    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0


def ray_measure(player: Player, x: int, width: int) -> Ray:
    """Return the ray for screen column ``x`` of a ``width`` wide view."""
    camera_x = 2 * x / width - 1.0
    return Ray(
        ray_dir_x=player.dir_x + player.plane_x * camera_x,
        ray_dir_y=player.dir_y + player.plane_y * camera_x,
    )


def ray_dist(player: Player, ray: Ray) -> None:
    """Set the ray's starting cell and the distance between grid lines."""
    ray.map_x = int(player.pos_x)
    ray.map_y = int(player.pos_y)
    ray.delta_dist_x = _FAR if ray.ray_dir_x == 0 else abs(1.0 / ray.ray_dir_x)
    ray.delta_dist_y = _FAR if ray.ray_dir_y == 0 else abs(1.0 / ray.ray_dir_y)


def side_ray(player: Player, ray: Ray) -> None:
    """Set the step direction and distance to the first grid line on each axis."""
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_dist_y


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _after_comma(text: str) -> str:
    index = text.find(",")
    return "" if index == -1 else text[index + 1:]


def rgb_str_to_int(text: str) -> int:
    """Turn an "R,G,B" string into 0xRRGGBB.

    Anything before the first digit is skipped, so "F 220,100,0" works.
    """
    start = next((i for i, ch in enumerate(text) if ch.isdigit() and ch.isascii()), len(text))
    rest = text[start:]
    red = _atoi(rest)
    rest = _after_comma(rest)
    green = _atoi(rest)
    rest = _after_comma(rest)
    blue = _atoi(rest)
    return _to_int32((red << 16) | (green << 8) | blue)


def _c_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def wall_span(wall_dist: float, screen_height: int) -> tuple[int, int]:
    """Return the first and last screen row of a wall slice at ``wall_dist``.

    Distances under 0.05 are treated as 0.05 and rows are clamped to the screen.
    """
    wall_dist = max(wall_dist, MIN_WALL_DIST)
    line_height = int(screen_height / wall_dist)
    draw_start = _c_div(-line_height, 2) + screen_height // 2
    draw_start = max(draw_start, 0)
    draw_end = -draw_start + screen_height
    if draw_end >= screen_height:
        draw_end = screen_height - 1
    return draw_start, draw_end


def sky_floor(
    image: Image,
    x: int,
    draw_start: int,
    draw_end: int,
    ceiling: Optional[str],
    floor: Optional[str],
) -> None:
    """Paint the ceiling above and the floor below a wall slice in column ``x``.

    ``ceiling`` and ``floor`` are "R,G,B" strings; None selects the default
    colour. Rows above ``draw_start`` get the ceiling, rows after
    ``draw_end`` the floor.
    """
    sky_color = rgb_str_to_int(ceiling) if ceiling else DEFAULT_SKY_COLOR
    ground_color = rgb_str_to_int(floor) if floor else DEFAULT_GROUND_COLOR
    if not 0 <= x < image.width:
        return
    for y in range(max(draw_start, 0)):
        if y < image.height:
            image.put_pixel(x, y, sky_color)
    for y in range(max(draw_end + 1, 0), image.height):
        image.put_pixel(x, y, ground_color)


def choose_texture(side: int, ray: Ray, textures: Mapping[str, T]) -> T:
    """Pick the "north", "south", "east" or "west" texture for a wall hit.

    ``side`` is 0 when the ray crossed a vertical grid line, 1 otherwise.
    """
    if side == 0:
        return textures["east"] if ray.ray_dir_x > 0 else textures["west"]
    return textures["south"] if ray.ray_dir_y > 0 else textures["north"]


def strip_whitespace(text: Optional[str]) -> Optional[str]:
    """Remove trailing spaces, tabs and line breaks."""
    if text is None:
        return None
    return text.rstrip(_TRAILING)


def parse_texture_path(path: Optional[str], prefix: str) -> Optional[str]:
    """Drop a three-character identifier such as "NO " and surrounding blanks."""
    if path is None:
        return None
    if path[:3] == prefix[:3]:
        path = path[3:]
    return strip_whitespace(path.lstrip(" "))