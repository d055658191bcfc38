"""
CSV Explorer — Configuration: paths, engine constants, environment overrides.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with CSVX_DATA_FILE / CSVX_DATA_URL env vars
# ---------------------------------------------------------------------------
STATIC_FOLDER = Path(__file__).parent / "static"
DATA_FILE = Path(os.environ.get("CSVX_DATA_FILE", str(STATIC_FOLDER / "data.csv")))

# When set, the bundled dataset is fetched over HTTP instead of read from disk
DATA_URL = os.environ.get("CSVX_DATA_URL") or None

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("CSVX_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ---------------------------------------------------------------------------
# Type classification
# ---------------------------------------------------------------------------
# Share of non-missing values that must parse as numbers for a numeric column
NUMERIC_THRESHOLD = 0.7

# ---------------------------------------------------------------------------
# Chart derivation
# ---------------------------------------------------------------------------
HISTOGRAM_BINS = 8
CATEGORY_TOP_N = 10
MISSING_LABEL = "Unknown"

# ---------------------------------------------------------------------------
# Summary presentation
# ---------------------------------------------------------------------------
SUMMARY_DECIMALS = 2
NO_DATA = "-"

# ---------------------------------------------------------------------------
# Excel export
# ---------------------------------------------------------------------------
EXPORT_FILENAME = "csv_explorer_export.xlsx"
EXPORT_MAX_ROWS = 50_000
