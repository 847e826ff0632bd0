from slowapi import Limiter
from slowapi.util import get_remote_address

from cityweather.core.config import get_settings


_settings = get_settings()

limiter = Limiter(key_func=get_remote_address, enabled=_settings.rate_limit_enabled)
LOOKUP_RATE_LIMIT = _settings.lookup_rate_limit
