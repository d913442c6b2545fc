"""Environment settings for the drive toolkit."""

from .app import AppSettings, get_settings


__all__ = ["AppSettings", "get_settings"]
