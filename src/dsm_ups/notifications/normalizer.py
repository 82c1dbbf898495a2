"""
Normalizer for raw DSM UPS notifications.

Sits between whatever delivers notifications (mail, syslog, webhook) and the
alerting pipeline: classifies the message, reads the "From HOST" trailer DSM
appends on a later line, and logs the outcome.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from ..config import NormalizerConfig, get_config
from ..events import AnyDsmEvent, NoMatch, classify

logger = logging.getLogger(__name__)

_SENDER_RE = re.compile(r"^From[ \t]+(?P<sender>\S+)[ \t]*$", re.MULTILINE)


class UpsNotification(BaseModel):
    """A classified notification plus the context around the event."""

    event: AnyDsmEvent
    remainder: str = Field(
        "", description="Text following the recognized notification, untouched"
    )
    sender: Optional[str] = Field(
        None, description="Host named on the 'From HOST' trailer line"
    )
    received_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def parse_sender(remainder: str) -> Optional[str]:
    """Return the host from the first 'From HOST' line of `remainder`."""
    match = _SENDER_RE.search(remainder)
    if match:
        return match.group("sender")
    return None


class UpsNotificationNormalizer:
    """
    Normalizes raw DSM notifications into UpsNotification records.
    """

    def __init__(self, config: Optional[NormalizerConfig] = None):
        """
        Initialize normalizer.

        Args:
            config: Normalizer settings (defaults to environment configuration)
        """
        self.config = config or get_config()

    def normalize(self, message: str) -> Optional[UpsNotification]:
        """
        Classify a single notification.

        Args:
            message: Raw notification body

        Returns:
            UpsNotification or None if the message is not a UPS notification
        """
        try:
            event, remainder = classify(message)
        except NoMatch:
            if self.config.log_unmatched:
                logger.warning(f"Unrecognized UPS notification: {message[:80]!r}")
            return None

        sender = parse_sender(remainder) if self.config.parse_sender else None

        if event.requires_shutdown:
            logger.warning(f"Shutdown-worthy event: {event.summary()}")
        else:
            logger.info(f"Classified event: {event.summary()}")

        return UpsNotification(event=event, remainder=remainder, sender=sender)

    def normalize_many(self, messages: Iterable[str]) -> List[UpsNotification]:
        """
        Classify several notifications, dropping the unrecognized ones.

        Args:
            messages: Raw notification bodies

        Returns:
            Recognized notifications in input order
        """
        notifications = []
        total = 0
        for message in messages:
            total += 1
            notification = self.normalize(message)
            if notification is not None:
                notifications.append(notification)

        logger.debug(f"Normalized {len(notifications)}/{total} notifications")
        return notifications
