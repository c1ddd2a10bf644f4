"""
Application Services.

Use cases of the order and supply boards.
"""

from .trackers import (
    BoardService,
    OrderTracker,
    StatusTracker,
    SupplyTracker,
)
from .demo_data import seed_demo_data

__all__ = [
    'BoardService',
    'OrderTracker',
    'StatusTracker',
    'SupplyTracker',
    'seed_demo_data',
]
