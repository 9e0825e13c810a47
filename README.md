# torrehanoi

An animated Towers of Hanoi. You choose how many discs to use and how fast
they move. The puzzle is then solved on screen across three rods, one move at
a time.

## Installation

```
pip install .
```

This installs `pygame`, which draws the window.

## Running

```
torrehanoi
```

First you answer some questions in the terminal:

1. **Discs**: how many discs to stack on the first rod. This must be a
   positive whole number. Any other answer ends the program with an error.
2. **Speed**: how many pixels a disc moves per frame. The value must be
   greater than 0 and at most 50. Until you give such a value, the question
   is asked again.
3. There may be a `resultados.txt` in the current directory that was saved
   for the same number of discs. If so, you are asked whether to replay that
   solution (`y`) or solve the puzzle again (`n`). If no such file exists, or
   its disc count is different, a new solution is recorded without asking.

After that, the game window opens.

## Controls

| Key   | When                     | Action                                          |
|-------|--------------------------|-------------------------------------------------|
| `E`   | before starting          | Start solving, or replay the saved solution     |
| `P`   | while discs are moving   | Pause or resume                                 |
| `→`   | while discs are moving   | Increase the speed by 5                         |
| `←`   | while discs are moving   | Decrease the speed by 5, only if it is above 5  |
| `R`   | once finished            | Put the discs back so you can start again       |
| `Esc` | any time                 | Quit                                            |

During a new solve, each move is also printed to the terminal.

## Saved solutions

A new solution is written to `resultadosTmp.txt` while it plays:

- The first line holds the number of discs.
- Each line after it holds a disc number and a destination rod, separated by
  a tab.

When the animation finishes, this file replaces `resultados.txt`. If you quit
before the end, the partial file is deleted and any earlier `resultados.txt`
is left unchanged.

Only the first solve after the window opens is recorded. Solves after an `R`
restart are animated but not saved.

## Using it as a library

You can get the move sequence without opening a window:

```python
from torrehanoi.results import hanoi_moves

for disc, from_rod, to_rod in hanoi_moves(3, 0, 2, 1):
    print(disc, from_rod, to_rod)
```

Disc 1 is the smallest.

The other modules are:

- `torrehanoi.results`
  - `ResultsRecorder` writes a solution file. It has `record`, `commit` and
    `discard`, and can be used as a context manager: it commits on a normal
    exit and discards on an exception.
  - `read_disc_count` and `read_moves` read a solution file back.
- `torrehanoi.discs` holds the disc model and its step-by-step animation:
  `Disc`, `Color`, `create_discs`, `move_disc`, `update_states`,
  `reset_moves`, `render_discs` and `color_rgb`.
- `torrehanoi.wires` holds the rod model: `Wire`, `create_wires` and
  `render_wires`.
- `torrehanoi.app` holds the interactive parts: `prompt_settings`,
  `choose_results`, `Settings`, `HanoiApp` and `main`.