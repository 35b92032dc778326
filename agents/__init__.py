"""Agent package initialization."""

from agents.base_agent import BaseAgent
from agents.random_agent import RandomAgent

__all__ = ['BaseAgent', 'RandomAgent']
