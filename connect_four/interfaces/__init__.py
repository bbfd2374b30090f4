"""
connect_four.interfaces - User interfaces for Connect Four

This package contains the command-line front end and the interactive
human player agent.
"""

# Don't import anything here to avoid circular imports
__all__ = []
