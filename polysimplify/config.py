# ============================================================================
# config.py - Defaults and constants
# ============================================================================

DEFAULT_TOLERANCE = 1.0
DEFAULT_HIGHEST_QUALITY = True

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"

# scripts/simplify_demo.py
DEMO_OUT = "runs/simplify_demo.png"
DEMO_POINTS = 2000
DEMO_SEED = 0
DEMO_SOURCES = ("track", "spiral", "contour", "zigzag")
