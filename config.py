import os

# Presentation defaults
DEFAULT_CURRENCY = os.getenv("IMPACT_DEFAULT_CURRENCY", "USD").upper()
DEFAULT_LOCALE = os.getenv("IMPACT_LOCALE", "en_US")
DEFAULT_VERTICAL = os.getenv("IMPACT_DEFAULT_VERTICAL", "default").lower()

# Logging
LOG_LEVEL = os.getenv("IMPACT_LOG_LEVEL", "INFO").upper()

# Paths
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
ASSETS_DIR = os.path.join(BASE_DIR, "assets")
FONTS_DIR = os.path.join(ASSETS_DIR, "fonts")
