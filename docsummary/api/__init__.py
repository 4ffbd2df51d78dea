"""HTTP surface: Flask app factory and summarize blueprint."""
from docsummary.api.app import ApiServices, create_app
from docsummary.api.settings import AppSettings

__all__ = ["ApiServices", "AppSettings", "create_app"]
