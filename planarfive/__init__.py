"""Planar graph colouring by vertex reduction and by greedy assignment, with a random triangulation generator."""

__version__ = "0.1.0"