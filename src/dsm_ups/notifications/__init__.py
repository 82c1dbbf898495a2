"""
Caller-side handling of raw DSM UPS notifications.
"""

from .normalizer import UpsNotification, UpsNotificationNormalizer, parse_sender

__all__ = ["UpsNotification", "UpsNotificationNormalizer", "parse_sender"]
