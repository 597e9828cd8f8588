"""Board geometry, bitboards, FEN and hub notation, hub protocol parsing and endgame bitbase indexing for international draughts."""

__version__ = "0.1.0"