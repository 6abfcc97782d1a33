"""Deployment environment.

Import this before anything that reads settings: it loads the ``.env`` file
into the process environment. On a hosted platform the variables are set
directly and no ``.env`` file is present.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

VALID_ENVIRONMENTS = ('development', 'production', 'test')

ENVIRONMENT = os.environ.get('ENVIRONMENT', '').strip().lower()
if ENVIRONMENT not in VALID_ENVIRONMENTS:
    logging.warning(
        f"ENVIRONMENT='{ENVIRONMENT}' is not one of {', '.join(VALID_ENVIRONMENTS)}; "
        "running as development"
    )
    ENVIRONMENT = 'development'

IS_PRODUCTION_ENVIRONMENT = ENVIRONMENT == 'production'

__all__ = ['ENVIRONMENT', 'IS_PRODUCTION_ENVIRONMENT']
