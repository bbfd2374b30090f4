"""
connect_four/ai/__init__.py - Player agents for Connect Four

This package holds the capability interface consumed by the match
controller and the automated players built on it.
"""

from connect_four.ai.base import PlayerAgent
from connect_four.ai.random_bot import RandomBot

__all__ = ['PlayerAgent', 'RandomBot']
