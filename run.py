#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:
    python run.py play                      # asks for the number of players
    python run.py play --players 1 --name1 Alice
    python run.py --debug simulate --games 500 --seed 42
"""

import sys

from connect_four.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
