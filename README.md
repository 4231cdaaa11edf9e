# solong

Building blocks for a small tile-based puzzle game in which a character
walks around a walled map, picks up every collectible and then leaves
through the exit. The package reads and validates the text maps, checks
whether a map can be won, and decodes XPM sprites into pixel grids. It has
no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Map format

Maps are plain text files, conventionally with the `.ber` extension. Each
line is one row; blank lines are dropped. `solong.grid.check_map` accepts a
map only when:

- every row has the same length and the map is not square;
- the top and bottom rows, and the first and last column, are all wall;
- it holds only the tiles below (`F` only with `allow_enemies=True`);
- it has exactly one player, exactly one exit and at least one collectible.

| Character | Meaning     |
|-----------|-------------|
| `1`       | wall        |
| `0`       | floor       |
| `P`       | player      |
| `E`       | exit        |
| `C`       | collectible |
| `F`       | enemy       |

Example:

```
1111111111
1P00C00001
1000001C01
10C00000E1
1111111111
```

## Checking a map

```python
from solong.grid import read_map, check_map, check_winnable

grid = read_map("maps/level.ber")
info = check_map(grid, allow_enemies=False)       # MapInfo(players, exits, collectibles)
report = check_winnable(grid, info, allow_enemies=False)
print(report.winnable)
print(report.message)
```

`check_map` raises `InvalidMapError` (a `ValueError`) naming the rule that
was broken. `check_winnable` first flood-fills from the player through
everything but walls and enemies to find the exit; only if the exit is
reachable does it fill again, this time with the exit blocking the way, to
count the collectibles. The returned `WinnabilityReport` holds the outcome,
the counts reached, the map painted with `A` over every visited tile, and a
message that includes the painted map. `find_player` and `format_grid` are
available on their own.

## Other modules

- `solong.xpm` — `parse_xpm` decodes XPM text (or a sequence of image
  lines) and `load_xpm` reads a file, both giving an `XpmImage` of
  0xRRGGBB values; `XpmImage.pixel(x, y)` returns `None` for transparent
  pixels. Only `#rrggbb` colours and `None` are understood; other colour
  names become black. Bad data raises `XpmError`.
- `solong.lines` — `LineReader` and `read_lines` read a text or binary
  stream line by line through a small buffer, keeping newlines.
- `solong.printf` — `format_printf` and `printf` support `%s %c %d %i %u
  %x %X %p`; `printf` writes to standard output and returns the length.
- `solong.text` — ASCII classification (`is_alpha`, `is_digit`, …),
  `atoi`, `itoa`, `strchr`, `strrchr`, `strncmp`, `strnstr`.
- `solong.strbuild` — `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`, `strlcpy`, `strlcat`.
- `solong.fdio` — `put_char_fd`, `put_str_fd`, `put_endl_fd`,
  `put_nbr_fd` write directly to a file descriptor.

## What this package does not do

There is no playable game here: no window, no drawing of tiles, no
keyboard handling, no player movement or move counter, and no command to
start a game from a map file. The package stops at loading maps and
sprites and deciding whether a map is valid and winnable.