"""Ataxx playing engine: fixed-depth minimax with alpha-beta pruning."""
