"""Telegram bot that replies with the original date of forwarded messages."""
from __future__ import annotations

__version__ = "1.0.0"
