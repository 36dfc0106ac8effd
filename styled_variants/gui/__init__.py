"""Qt widgets rendered from variant styles."""
