# cubengine

Building blocks for a software raycaster, in pure Python with no
third-party dependencies.

## Modules

- `cubengine.colors`
  - `lookup_color(name)` looks up an X11 colour name, without regard to
    case, or a `#hex` literal. Unknown names give `0` and `"none"` gives
    `-1`.
  - `rgb_shifts(red_mask, green_mask, blue_mask)` returns an `RgbShifts`
    tuple that describes a visual's channel layout.
  - `good_color(color, depth, shifts)` converts `0xRRGGBB` to a pixel
    value. Depths of 24 bits or more pass the colour through unchanged.
- `cubengine.image`
  - `Image(width, height, bpp=32, big_endian=False)` is a pixel buffer
    whose rows are padded to 32 bits.
  - It has `put_pixel`, `get_pixel` and `fill`, and the attributes
    `data`, `size_line` and `endian`.
  - Coordinates outside the image raise `IndexError`.
- `cubengine.wordtab`
  - `str_str` and `str_str_quoted` search for a substring. The second
    ignores matches inside double quotes.
  - `split_words` splits on spaces and tabs.
- `cubengine.xpm`
  - `parse_xpm(lines)` and `xpm_to_image(data)` build an `Image` from XPM
    rows.
  - `xpm_file_to_image(path)` reads an XPM file. Comments in the file are
    removed with `strip_comments` and its strings are extracted with
    `quoted_lines`.
  - Transparent (`None`) pixels are stored as `0xFF000000`.
  - Malformed data raises `XpmError`, which is a `ValueError`.
- `cubengine.player`
  - `Player` is a dataclass that holds position, direction, camera plane,
    speed and movement flags.
  - `compute_move(player)` returns the next position. Diagonal steps are
    normalised so they are no longer than straight ones.
  - `move_player(player, grid)` applies the step. It refuses to enter
    `"1"` cells of a grid given as a list of strings, and returns whether
    the player moved.
  - `rotate_player(player, angle)` rotates the direction and the camera
    plane by `angle` radians.
- `cubengine.raycast`
  - `Ray`, `ray_measure`, `ray_dist` and `side_ray` set up the ray for
    one screen column.
  - `wall_span(wall_dist, screen_height)` gives the first and last row of
    a wall slice.
  - `sky_floor(image, x, draw_start, draw_end, ceiling, floor)` paints the
    ceiling and floor of a column. `ceiling` and `floor` are `"R,G,B"`
    strings, parsed with `rgb_str_to_int`; `None` selects the default
    colour `0xFFB6C1`.
  - `choose_texture(side, ray, textures)` picks `"north"`, `"south"`,
    `"east"` or `"west"` from a mapping.
  - `strip_whitespace` and `parse_texture_path` clean up texture paths
    read from a configuration line.
- `cubengine.textutil`
  - `is_blank` is true for a space, tab or newline.
  - `rgb_atoi(text)` parses a colour component. It returns `-1` when the
    text holds a stray character.
  - `copy_char_matrix` copies a list of rows.
- `cubengine.display`
  - `Display(width=1920, height=1080, depth=24)` is an in-memory screen.
    It opens windows with `new_window`, which returns a `Window`.
  - Events are queued with `post_event(window, Event(...))`. `loop()`
    delivers them to the hooks registered with `Window.hook`, `key_hook`,
    `mouse_hook` and `expose_hook`.
  - `loop_hook` registers a function that is called each time the queue
    runs dry.
  - Without a loop hook, `loop()` returns once the queue is empty. It also
    stops when no window is left or `loop_end()` is called.
  - A window keeps its contents in a pixel surface. Draw to it with
    `pixel_put` or `put_image` and read it back with `get_pixel`.

## Installation

```
pip install .
```

## Example

```python
from cubengine.image import Image
from cubengine.player import Player, move_player
from cubengine.raycast import wall_span
from cubengine.xpm import xpm_to_image

texture = xpm_to_image([
    "2 2 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
    "ba",
])
print(hex(texture.get_pixel(0, 0)))  # 0xff0000

player = Player(pos_x=1.5, pos_y=1.5, move_forward=True)
print(move_player(player, ["111", "101", "111"]))  # True

print(wall_span(2.0, 600))  # (150, 450)

frame = Image(320, 200, 32, False)
frame.fill(0x000000)
```

## What it does not do

- There is no command to run and no game loop that ties the pieces
  together.
- Nothing reads a map description file.
- Nothing steps a ray through the grid to find the wall it hits.
- Nothing draws textured wall slices.
- `cubengine.display` draws into memory only. It opens no window on the
  real screen and reads no real keyboard or mouse input.

## Tests

```
pip install .[test]
pytest
```