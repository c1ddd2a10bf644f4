"""
Settings package for the kitchen boards project.

DJANGO_ENV=prod loads production settings; anything else loads dev.
"""

import os

DJANGO_ENV = os.environ.get('DJANGO_ENV', 'dev').strip().lower()

if DJANGO_ENV == 'prod':
    from .prod import *
else:
    from .dev import *
