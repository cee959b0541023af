"""Rate limiting singleton using slowapi.

Keys on the client address; ProxyHeadersMiddleware in main.py has already
resolved it from X-Forwarded-For when running behind a proxy.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])
