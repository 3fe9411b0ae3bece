# This project was developed with assistance from AI tools.
"""Client module -- API client and local settings store."""

from .api import ApiError, LoanSupportClient
from .storage import ClientSettings, clear_settings, get_settings, save_settings

__all__ = [
    "ApiError",
    "ClientSettings",
    "LoanSupportClient",
    "clear_settings",
    "get_settings",
    "save_settings",
]
