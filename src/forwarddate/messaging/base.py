from __future__ import annotations

from abc import ABC, abstractmethod

from forwarddate.schemas.telegram import ReplyPayload


class MessageSender(ABC):
    """Abstract base class for outbound reply delivery."""

    @abstractmethod
    async def send(self, payload: ReplyPayload) -> None:
        """
        Deliver a reply, at most once.

        Implementations must not raise on delivery failure and must not retry;
        the outcome is intentionally discarded by callers.

        Args:
            payload: Reply to deliver
        """
        pass

    @abstractmethod
    def validate_config(self) -> bool:
        """
        Validate sender configuration.

        Returns:
            True if configuration is valid, False otherwise
        """
        pass
