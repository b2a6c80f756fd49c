"""
Hunt module.

Provides hunt state and search execution:
- LocationInfo / LocationTable: Clues and visited flags per location
- HuntStep: Records a single search move
- HuntResult: Complete search record
- HuntEngine: Runs clue-guided and cheapest-route searches
"""

from treasure_hunt.hunt.engine import HuntEngine, find_sentinel_target
from treasure_hunt.hunt.state import HuntResult, HuntStep, LocationInfo, LocationTable

__all__ = [
    "HuntEngine",
    "HuntResult",
    "HuntStep",
    "LocationInfo",
    "LocationTable",
    "find_sentinel_target",
]
