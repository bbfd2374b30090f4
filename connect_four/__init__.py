"""
connect_four - Connect Four rules engine

This package provides the Connect Four board with its win detection, a
match controller alternating two pluggable player agents, a random bot
and a small command-line interface.
"""

# Version number
__version__ = '0.1.0'
