"""
Configuration constants for the Treasure Hunt project.

All paths, settings, and tunable parameters are defined here.
Most values can be overridden from the environment or a .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of treasure_hunt/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains the island graph, clues, decision tree)
DATA_DIR = PROJECT_ROOT / "data"

# Individual data file paths
GRAPH_PATH = Path(os.environ.get("TREASURE_GRAPH_PATH", DATA_DIR / "graph.txt"))
CLUES_PATH = Path(os.environ.get("TREASURE_CLUES_PATH", DATA_DIR / "clues.txt"))
DECISION_TREE_PATH = Path(
    os.environ.get("TREASURE_TREE_PATH", DATA_DIR / "decision_tree.json")
)

# Where the found route is written, one location name per line
ROUTE_OUTPUT_PATH = Path(os.environ.get("TREASURE_ROUTE_PATH", "treasure_route.txt"))

# =============================================================================
# Hunt Configuration
# =============================================================================

# Location the hunter starts from
DEFAULT_START = os.environ.get("TREASURE_START", "Beach")

# A location whose lowercased name contains this is the treasure
# (used when the clue file does not declare a target)
TREASURE_SENTINEL = "treasure"

# Let a clue send the hunter to a location with no direct edge from here.
# Off by default so every found route walks along real edges.
FOLLOW_DISTANT_CLUES = os.environ.get(
    "TREASURE_FOLLOW_DISTANT_CLUES", ""
).lower() in ("1", "true", "yes")

# =============================================================================
# Graph Configuration
# =============================================================================

# Edge costs are stored as unsigned 32-bit values
MAX_EDGE_COST = 2**32 - 1

# "Unreachable" distance; path sums saturate here instead of growing unbounded
INFINITE_COST = 2**63 - 1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "graph": GRAPH_PATH.exists(),
        "clues": CLUES_PATH.exists(),
        "decision_tree": DECISION_TREE_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
