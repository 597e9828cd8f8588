# draughtscore

Building blocks for international (10×10) draughts software. Variants are
named by `draughtscore.board.Variant`: `NORMAL`, `KILLER`, `BT`
(breakthrough), `FRISIAN` and `LOSING`.

## Modules

- `draughtscore.board` – square numbering: standard 1–50 notation, dense
  indices 0–49 and the 63-slot sparse layout used by bitboards
  (`square_from_std`, `square_to_std`, `square_sparse`, `square_dense`,
  `square_make`, `square_file`, `square_rank`, `square_opp`,
  `square_is_promotion`, `square_from_string`, `string_is_square`,
  `dir_inc`). Also the enums `Side`, `Piece`, `PieceSide`, `Variant`, the
  helpers `side_opp`, `side_to_string`, `piece_side_is_piece`,
  `piece_side_is_side`, and the exception `BadInput` (a `ValueError`).
- `draughtscore.util` – `round_half_up`, `div_round` (rounded integer
  division), `rand_bool`, `bit_first`, `bit_count`, `read_bytes`
  (big-endian integer from a binary stream, `EOFError` when short), `ftos`
  and `trim`.
- `draughtscore.bitboard` – board sets as Python integers (`bit`, `has`,
  `is_ok`, `is_incl`, `count`, `first`, `iter_squares`, and masks such as
  `SQUARES`, `WM_SQUARES`, `BM_SQUARES`) and `BitTables`, the precomputed
  file, rank, move and capture tables for one variant (`man_moves`,
  `man_captures`, `king_moves`, `king_captures`, `capture_mask`, `beyond`,
  `line_inc`, `attack`).
- `draughtscore.hub` – the line protocol: `Scanner` reads a command and
  `name=value` pairs (`Pair`), with quoted values allowed; `format_pair`,
  `add_pair` and `error_line` build reply lines; `read` and `write` handle
  one line on a text stream (stdin/stdout by default).
- `draughtscore.fen` – positions in FEN (`pos_from_fen`, `pos_fen`) and in
  the 51-character hub form (`pos_from_hub`, `pos_hub`). Parsing returns a
  frozen `Setup` holding the side to move and four bitboards
  (`wm`, `bm`, `wk`, `bk`); malformed or impossible positions raise
  `BadInput`.
- `draughtscore.bitbase_comp` – `CompressedTable`, a run-length coded table
  of values with random access, built with `CompressedTable.from_bytes` or
  read from a file with `CompressedTable.load`; `code_value` and
  `code_length` decode a single code byte.
- `draughtscore.bitbase_index` – endgame table identifiers (`id_make`,
  `id_wm`, `id_bm`, `id_wk`, `id_bk`, `id_name`, `id_size`,
  `id_is_illegal`, `id_is_end`, `pos_id`) and the perfect index of a
  position within its table (`pos_index`, `index_size`, `tuple_size`).
- `draughtscore.bitbase_value` – the `Value` enum (`DRAW`, `LOSS`, `WIN`,
  `UNKNOWN`) and how values combine (`value_age`, `value_max`,
  `value_update`, `value_from_nega`, `value_to_string`).

## Installation

```
pip install .
```

## Examples

```python
from draughtscore.board import Variant
from draughtscore.fen import pos_from_fen, pos_fen, pos_hub

setup = pos_from_fen("W:W31-50:B1-20", Variant.NORMAL)
print(pos_fen(setup))   # W:W31-50:B1-20
print(pos_hub(setup))   # 51 characters: side to move, then one per square
```

```python
from draughtscore.hub import Scanner, add_pair, error_line

scan = Scanner('pos pos=Wbbb moves="32-28 19-23"')
scan.get_command()      # 'pos'
scan.get_pair()         # Pair(name='pos', value='Wbbb')
scan.get_pair()         # Pair(name='moves', value='32-28 19-23')
scan.eos()              # True

add_pair("info", "depth", 12)   # 'info depth=12'
error_line("bad move")          # 'error message="bad move"'
```

```python
from draughtscore.bitbase_index import id_make, index_size, pos_id, pos_index
from draughtscore.fen import pos_from_fen

setup = pos_from_fen("W:W33:B18")
table = pos_id(setup)             # same as id_make(1, 1, 0, 0)
index_size(table)                 # 2025
pos_index(table, setup)           # an index in range(2025)
```

## What this package does not do

It has no move generator, no search, no evaluation, no opening book and no
engine command loop: it provides the board model, notation, protocol
parsing and endgame-table indexing that such programs are built on. It
ships no endgame table files; `CompressedTable.load` reads ones you supply.

## Running the tests

```
pip install .[test]
pytest
```