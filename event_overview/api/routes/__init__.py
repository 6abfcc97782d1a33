"""Routes package initialization."""

from . import events, health

__all__ = ['events', 'health']
