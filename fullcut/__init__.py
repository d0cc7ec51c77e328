"""
fullcut - Non-destructive silence removal engine.
"""

__version__ = "1.0"
