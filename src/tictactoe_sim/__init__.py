"""Tic-Tac-Toe simulator with tabular Q-learning self-play."""

__version__ = "0.1.0"
