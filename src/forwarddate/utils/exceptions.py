from __future__ import annotations


class ForwardDateException(Exception):
    """Base exception for the forward date bot."""

    pass


class ConfigurationError(ForwardDateException):
    """Raised when a required setting is missing at startup."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"Required setting {setting} is not configured")


class WebhookRegistrationError(ForwardDateException):
    """Raised when Telegram refuses or fails to register the webhook."""

    def __init__(self, webhook_url: str, reason: str):
        self.webhook_url = webhook_url
        self.reason = reason
        super().__init__(f"Failed to register webhook {webhook_url}: {reason}")
