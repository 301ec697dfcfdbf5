from __future__ import annotations

from forwarddate.utils.exceptions import (
    ConfigurationError,
    ForwardDateException,
    WebhookRegistrationError,
)

__all__ = [
    "ForwardDateException",
    "ConfigurationError",
    "WebhookRegistrationError",
]
