"""Agent implementations for Tic-Tac-Toe."""

from tictactoe_sim.agents.base import Agent
from tictactoe_sim.agents.random import RandomAgent
from tictactoe_sim.agents.interactive import InteractiveAgent
from tictactoe_sim.agents.q_learning import LearningAgent, ValueTable

__all__ = ["Agent", "RandomAgent", "InteractiveAgent", "LearningAgent", "ValueTable"]
