"""Configuration package.

Import ``environment`` before anything that reads environment variables.
"""

from .environment import IS_PRODUCTION_ENVIRONMENT
from .settings import Config

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'Config']
