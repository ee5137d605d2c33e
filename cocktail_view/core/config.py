import os

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

# Upstream cocktail API: GET {COCKTAIL_API_URL}/cocktail/{id}
COCKTAIL_API_URL = os.getenv("COCKTAIL_API_URL", "http://127.0.0.1:5000")
COCKTAIL_API_TIMEOUT_S = float(os.getenv("COCKTAIL_API_TIMEOUT_S", "10"))

# Theme used when the caller doesn't send one
DEFAULT_THEME = os.getenv("DEFAULT_THEME", "dark")

# Where the placeholder / glassware / method artwork is served from
IMAGES_URL = os.getenv("IMAGES_URL", "/static/images").rstrip("/")

HOME_PATH = "/"

# Hosts the sidebar may forward submissions to (comma separated)
CALLBACK_HOSTS = {
    h.strip().lower()
    for h in os.getenv("CALLBACK_HOSTS", "127.0.0.1,localhost").split(",")
    if h.strip()
}
