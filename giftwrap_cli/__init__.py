"""
Giftwrap CLI - Command-line interface for the hull engine.

Reads points from a YAML file and prints the hull (or every algorithm
step) as JSON.

Usage:
    giftwrap solve config/points/square.yaml
    giftwrap step config/points/square.yaml --max-steps 20
"""

__version__ = "1.0.0"
