"""Zeeman's catastrophe machine: spring potential, angle tracking and viewer."""
