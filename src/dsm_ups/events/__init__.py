"""
Events package for UPS notification models and classification.
"""

from .models import (
    AnyDsmEvent,
    DsmEvent,
    EventType,
    Host,
    Severity,
    Test,
    UpsAcMode,
    UpsBatteryMode,
    UpsConnected,
    UpsConnectionLost,
    UpsLowBattery,
)
from .parser import RECOGNIZERS, NoMatch, classify

__all__ = [
    "AnyDsmEvent",
    "DsmEvent",
    "EventType",
    "Host",
    "Severity",
    "Test",
    "UpsAcMode",
    "UpsBatteryMode",
    "UpsConnected",
    "UpsConnectionLost",
    "UpsLowBattery",
    "RECOGNIZERS",
    "NoMatch",
    "classify",
]
