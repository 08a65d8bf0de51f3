"""Configuration, auth, call context and error primitives."""

from .auth import AuthProvider, BearerAuth, ClientCredentialsAuth, NoAuth
from .config import XiboSettings, clear_settings_cache, get_settings
from .context import CmsContext

__all__ = [
    "AuthProvider",
    "BearerAuth",
    "ClientCredentialsAuth",
    "CmsContext",
    "NoAuth",
    "XiboSettings",
    "clear_settings_cache",
    "get_settings",
]
