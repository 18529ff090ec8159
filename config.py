"""
Voice-Map Configuration
Central configuration for paths, endpoints, and chart styling.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"

# Default dataset paths
EMBEDDINGS_CSV_PATH = DATA_DIR / "embeddings.csv"

# Only the first rows are plotted to keep the chart responsive
ROW_LIMIT = 100

# Remote embedding service
EMBEDDING_ENDPOINT = os.getenv(
    "VOICE_MAP_ENDPOINT",
    "https://sentence-embedding-eatrmwevgq-ew.a.run.app/",
)
EMBEDDING_TIMEOUT_SECONDS = float(os.getenv("VOICE_MAP_TIMEOUT", "30"))

# Query parameter names for the live lookup
QUERY_PARAM_ACTIVE = "active"
QUERY_PARAM_PASSIVE = "passive"

# Series colors (border, fill)
ACTIVE_BORDER_COLOR = "#43a047"
ACTIVE_FILL_COLOR = "#7cb342"
PASSIVE_BORDER_COLOR = "#1e88e5"
PASSIVE_FILL_COLOR = "#039be5"
EXTENSION_BORDER_COLOR = "#8e24aa"
EXTENSION_FILL_COLOR = "#d81b60"

# Connector drawn between the two phrasings of the selected pair
CONNECTOR_DASH = (2, 2)
CONNECTOR_COLOR = "#f4511e"
CONNECTOR_WIDTH = 2

# Tooltip settings
TOOLTIP_WINDOW_WORDS = 5

# Visualization settings
PLOT_HEIGHT = 600
FONT_SIZE = 16
FONT_FAMILY = '"Alegreya", sans-serif'
CHART_KEY = "sentences"

# Logging
LOG_LEVEL = os.getenv("VOICE_MAP_LOG_LEVEL", "INFO")
