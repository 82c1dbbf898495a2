"""
UPS event data models.

Synology DSM sends a handful of fixed English notifications about the UPS it
monitors. Each recognized notification becomes one of the DsmEvent variants
below, all of which wrap the Host the notification is about.
"""

from enum import Enum
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Kinds of UPS notifications."""

    UPS_BATTERY_MODE = "ups_battery_mode"
    UPS_LOW_BATTERY = "ups_low_battery"
    UPS_AC_MODE = "ups_ac_mode"
    UPS_CONNECTION_LOST = "ups_connection_lost"
    UPS_CONNECTED = "ups_connected"
    TEST = "test"


class Severity(str, Enum):
    """Event severity levels."""

    INFO = "info"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Host(BaseModel):
    """Machine a UPS notification was generated by."""

    name: str = Field(..., min_length=1, description="Host name exactly as it appears in the message")
    battery_msg: Optional[str] = Field(
        None, description="Battery status text, only set for battery mode events"
    )

    class Config:
        frozen = True


class DsmEvent(BaseModel):
    """
    Base class for classified UPS notifications.

    Subclasses pin `event_type` to a single value so that a serialized event
    can be validated back into the right variant through AnyDsmEvent.
    """

    event_type: EventType
    host: Host

    severity: ClassVar[Severity] = Severity.INFO
    description: ClassVar[str] = ""

    class Config:
        frozen = True

    @property
    def requires_shutdown(self) -> bool:
        """Whether the alerting pipeline should start a shutdown for this event."""
        return False

    def summary(self) -> str:
        """
        Generate a human-readable summary of this event.

        Returns:
            One-line summary suitable for logging or display
        """
        parts = [
            f"[{self.severity.value.upper()}]",
            f"{self.event_type.value}:",
            self.host.name,
            self.description,
        ]
        if self.host.battery_msg:
            parts.append(f"({self.host.battery_msg})")
        return " ".join(parts)


class UpsBatteryMode(DsmEvent):
    """UPS switched to battery power."""

    event_type: Literal[EventType.UPS_BATTERY_MODE] = EventType.UPS_BATTERY_MODE

    severity: ClassVar[Severity] = Severity.HIGH
    description: ClassVar[str] = "UPS entered battery mode"


class UpsLowBattery(DsmEvent):
    """UPS battery is critically low."""

    event_type: Literal[EventType.UPS_LOW_BATTERY] = EventType.UPS_LOW_BATTERY

    severity: ClassVar[Severity] = Severity.CRITICAL
    description: ClassVar[str] = "UPS reached low battery"

    @property
    def requires_shutdown(self) -> bool:
        return True


class UpsAcMode(DsmEvent):
    """UPS returned to mains power."""

    event_type: Literal[EventType.UPS_AC_MODE] = EventType.UPS_AC_MODE

    description: ClassVar[str] = "UPS returned to AC mode"


class UpsConnectionLost(DsmEvent):
    """Host lost its connection to the UPS."""

    event_type: Literal[EventType.UPS_CONNECTION_LOST] = EventType.UPS_CONNECTION_LOST

    severity: ClassVar[Severity] = Severity.MEDIUM
    description: ClassVar[str] = "lost the connection to the UPS"


class UpsConnected(DsmEvent):
    """Host (re)connected to the UPS."""

    event_type: Literal[EventType.UPS_CONNECTED] = EventType.UPS_CONNECTED

    description: ClassVar[str] = "connected to the UPS"


class Test(DsmEvent):
    """Manually triggered test notification."""

    # Keep pytest from collecting this as a test class
    __test__ = False

    event_type: Literal[EventType.TEST] = EventType.TEST

    description: ClassVar[str] = "test notification"


AnyDsmEvent = Annotated[
    Union[UpsBatteryMode, UpsLowBattery, UpsAcMode, UpsConnectionLost, UpsConnected, Test],
    Field(discriminator="event_type"),
]
