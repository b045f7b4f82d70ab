"""API module for Atlas tools.

Functions defined here serve as the single source of truth for CLI commands.
"""

__all__ = []
