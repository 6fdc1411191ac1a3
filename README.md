# colordla

A diffusion-limited aggregation (DLA) simulator in which red and blue
walkers compete to grow clusters around a yellow seed.

Walkers spawn on a random edge of the grid and wander one cell at a time
(a step that would leave the grid is skipped) until one of their four
neighbours is occupied:

- If a neighbour is yellow, purple, or the walker's own colour, the walker
  sticks. With a small probability a green walker then starts on the first
  occupied cell near it, wanders for up to 100 steps, and on reaching an
  empty cell turns the empty cells of the 3x3 block around it purple.
- Otherwise the walker has met only a rival colour and a detonation follows.
  With some probability every non-yellow cell within the blast radius is
  cleared (and the centre cell with it); then each red or blue cell within
  one more ring turns purple with some probability. Walkers in the first
  half of a run use one set of blast settings, the rest another.

Even-numbered walkers are red, odd-numbered ones blue. Grids can be
rendered as ANSI-coloured text or written as plain-text PPM (P3) images.

## Install

```
pip install .
```

No dependencies beyond the standard library.

## Command line

```
colordla
```

With no command, runs the benchmark on a 300x300 grid with 90,000 walkers:
one simulation per thread count (1, 2, 4, 6, 8, 10, 12, 16, 20, 32, 64),
each written to `img_<threads>.ppm`, with a table of times and speedups.
Speedup is measured against a fixed reference time of 121 seconds.

```
colordla benchmark --width 100 --height 100 --walkers 5000 --threads 1 2 4 --out-dir out --seed 7
colordla serial --width 300 --height 300 --output output.ppm --seed 7
colordla classic --width 100 --height 100 --particles 1000 --seed 7
```

- `benchmark` takes `--width`, `--height`, `--walkers` (default width x
  height), `--threads`, `--out-dir` and `--seed`.
- `serial` does one single-threaded run, prints its time, writes the PPM
  file given by `--output` (default `./output.ppm`) and prints the colour
  counts.
- `classic` runs the plain single-colour model and prints it with `#`
  characters.

Without `--seed`, the current time seeds the random generators. Run
`colordla <command> --help` for the options of each command.

## Library

```python
import random

from colordla.grid import Color, Grid
from colordla.simulation import Rules, generate_dla

grid = Grid(40, 10)
grid.seed_center(Color.YELLOW)
generate_dla(grid, 1000, random.Random(1), Rules())

print(grid.render_colored())
print(grid.count_colors().format())
```

Modules:

- `colordla.grid`: `Grid` (cell access, `seed_center`, `occupied`,
  `merge_max`, `count_colors`, `render`, `render_colored`, `to_ppm`,
  `export_ppm`), the `Color` values, the `Palette` used for images
  (`LIGHT` or `DARK`) and `ColorCounts`.
- `colordla.walker`: `Walker` and `spawn_at_edge`.
- `colordla.effects`: `spawn_green` and `detonate`.
- `colordla.simulation`: `Rules` (blast settings, green settings, whether
  walkers paint their path, an optional step limit per walker),
  `generate_dla`, `generate_threaded`, `partition_walkers` and
  `generate_distributed`.
- `colordla.classic`: `ClassicDLA`, the plain single-colour model.
- `colordla.cli`: `run_benchmarks` and `main`.

`generate_threaded` runs the walkers on a pool of threads that share one
grid, handing them out in chunks of ten, and returns the seconds taken.
`generate_distributed` splits the walkers into contiguous blocks
(`partition_walkers`), grows a separately seeded copy of the grid for each
block, and merges the copies cell by cell with `Grid.merge_max`.

## What it does not do

- `generate_distributed` runs its workers one after another in the calling
  process; it does not start processes or spread work across machines.
- The threaded runs share one grid without per-cell locking, and the
  threads run Python code, so more threads do not necessarily mean shorter
  times.
- Images are written only as plain-text PPM; there is no other image
  format and no viewer.