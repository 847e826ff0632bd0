import os

# Tests share one in-memory limiter; keep it out of the way.
os.environ.setdefault("CITYWEATHER_RATE_LIMIT_ENABLED", "false")
