"""Pygame front-end for Tank City."""

from tankcity.pygame.app import PygameTankCity, run_pygame

__all__ = ["PygameTankCity", "run_pygame"]
