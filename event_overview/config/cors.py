"""CORS options passed to FastAPI's CORSMiddleware."""

import os

from .environment import IS_PRODUCTION_ENVIRONMENT


def _allowed_origins():
    configured = [origin.strip() for origin in os.getenv('CORS_ORIGINS', '').split(',') if origin.strip()]
    if configured:
        return configured
    # Any origin while developing; production must list its frontends
    return [] if IS_PRODUCTION_ENVIRONMENT else ['*']


CORS_CONFIG = {
    'allow_origins': _allowed_origins(),
    'allow_credentials': False,
    'allow_methods': ['GET', 'POST', 'OPTIONS'],
    'allow_headers': ['Content-Type', 'Accept'],
    'max_age': 3600,
}
