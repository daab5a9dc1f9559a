"""
Berra's Casino Game Hub.

Owns one engine per mini-game and switches between them.
"""

from src.hub.navigator import GameHub

__all__ = ["GameHub"]
