# rboard

`rboard` is a library for a board game workbench. It has the following parts:

- models of the games that can be played
- a parser for the analysis lines that a GTP engine such as KataGo prints
- storage for the list of configured engines
- a description of what a board view should draw

It has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Boards

`rboard.chessboard` provides two games. Both implement the `Chessboard` interface:

- `Gomoku` is played on a 15 × 15 board.
- `Zhenqi` is played on an 8 × 8 board. When a stone is placed, each adjacent stone moves one step away if the point beyond it is empty. An adjacent stone whose point beyond lies off the board is removed.

`all_board_names()` returns `(display name, identifier)` pairs. `get_chessboard(name)` creates the board for an identifier. An unknown identifier gives a `Gomoku` board.

```python
from rboard.chessboard import get_chessboard, Player

board = get_chessboard("gomoku")
board.go(7, 7)                      # "play B H8"
board.player() is Player.WHITE      # True
board.length()                      # (15, 15)
board.pieces()                      # [x][y] grid of (fill, outline) Colors or None
board.new_board()                   # empty board, black to move
```

For a legal move, `go(x, y)` returns the GTP `play` command. For a point that is occupied or outside the board it returns `None`. Column letters skip `I`, as they do in GTP.

`parse_vertex(vertex, width, height, skip_i)` turns a vertex such as `"H8"` back into board coordinates. It returns `None` in these cases:

- the vertex is `pass`
- the vertex is malformed
- the row is beyond the board

## Engine analysis

`rboard.analyze.parse_analyses(text)` splits a `kata-analyze` line at its `info` markers and gives one `Analysis` per candidate move. An `Analysis` holds these fields:

- `move`, `visits` and `winrate`
- `utility`
- the score fields: `score_mean`, `score_stdev`, `score_lead` and `score_selfplay`
- `prior`, `lcb` and `utility_lcb`
- `order`
- `pv`, the principal variation
- `pv_visits`

A number that cannot be parsed becomes zero.

`rboard.table` shows these records as table text:

- `default_columns()` returns the columns: order, move, visits, winrate, pv and pv visits.
- `Column.header()` gives the header text of a column.
- `Column.cell(row_index, row)` gives the text of one cell.
- `table_rows(analyses)` returns every row at once.

## Engine configuration

`rboard.engine_config.EnginePaths` keeps a list of `EngineArgs` entries. Each entry has a `path`, an `args` string and a display `name`.

The list is stored as JSON. By default it is kept in `engines.json` in the current directory. Every change saves the file. An index that is out of range raises `IndexError`.

```python
from rboard.engine_config import EnginePaths

paths = EnginePaths.load("engines.json")
paths.add("/opt/engines/katago")
paths.change_args(0, "gtp -config analysis.cfg")
paths.names()                        # ["katago"]
```

## Board view geometry

`rboard.board` works out how a board fits into a drawing area of a given width and height.

- `compute_layout(count, width, height)` gives a `BoardLayout` with the cell size and the padding.
- `BoardLayout.cell_at(x, y)` maps a canvas point to a board cell.
- `BoardLayout.cell_center(column, row)` maps a board cell to a canvas point.
- `column_labels` and `row_labels` give the coordinate labels.
- `draw(count, pieces, analyses, width, height, cursor)` returns, in painting order, the `Line`, `Circle` and `Label` shapes:
  - the grid
  - the coordinate labels
  - the hover marker
  - the stones
  - the engine's candidate moves with their winrates
- `click(count, width, height, x, y)` returns the cell that a click at a canvas point would play.

## What this package does not do

There is no application here. The package does not do any of the following:

- open a window or paint the shapes it describes
- start or talk to an engine process
- offer a command to run

A front end has to do these things. It paints the output of `draw` and sends the strings returned by `go` to an engine. It then passes the engine's output lines to `parse_analyses`.