from __future__ import annotations

from forwarddate.api import webhook

__all__ = [
    "webhook",
]
