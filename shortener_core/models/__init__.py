"""
Database models for the URL shortener core.

Domain owns Paths, Path owns AccessLogs. ApiKey stands alone and is only
consulted by the internal sync endpoints.
"""

from .api_key import ApiKey
from .domain import Domain
from .path import Path
from .access_log import AccessLog

__all__ = ["ApiKey", "Domain", "Path", "AccessLog"]
