"""hunt - open one search across many engines"""

from .cli import cli

__all__ = ['cli']
