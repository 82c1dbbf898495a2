"""
Classifier for Synology DSM UPS notification messages.

Each recognizer reads a fixed template from the front of the message:
literal anchors interleaved with extracted fields. `classify` tries the
recognizers in RECOGNIZERS order and returns the first match together with
whatever text followed it.

Several templates share the "The UPS device connected to " prefix, so the
order of RECOGNIZERS matters and must not be changed casually.

This module performs no logging or I/O; callers decide what to do with
NoMatch.
"""

from typing import Callable, Tuple

from .models import (
    DsmEvent,
    Host,
    Test,
    UpsAcMode,
    UpsBatteryMode,
    UpsConnected,
    UpsConnectionLost,
    UpsLowBattery,
)

UPS_DEVICE_PREFIX = "The UPS device connected to "
BATTERY_MODE_ANCHOR = " has entered battery mode."
LOW_BATTERY_ANCHOR = " has reached low battery."
AC_MODE_ANCHOR = " has returned to AC mode."
TEST_PREFIX = "Test Message from "
TEST_ANCHOR = "."
CONNECTION_LOST_ANCHOR = " has lost the connection to the UPS."
CONNECTED_ANCHOR = " has connected to the UPS device."

LINE_BREAKS = "\r\n"


class NoMatch(Exception):
    """Raised when a message does not start with any known notification."""


Recognizer = Callable[[str], Tuple[DsmEvent, str]]


def _tag(text: str, literal: str) -> str:
    """Consume `literal` from the front of `text`."""
    if not text.startswith(literal):
        raise NoMatch()
    return text[len(literal):]


def _take_until(text: str, delimiters: str) -> Tuple[str, str]:
    """
    Split `text` at the first character found in `delimiters`.

    The delimiter is left at the front of the returned rest.

    Raises:
        NoMatch: if no delimiter occurs in `text`
    """
    positions = [text.find(d) for d in delimiters]
    found = [p for p in positions if p != -1]
    if not found:
        raise NoMatch()
    index = min(found)
    return text[:index], text[index:]


def _take_line(text: str) -> Tuple[str, str]:
    """Split `text` at the first line break, or take all of it."""
    try:
        return _take_until(text, LINE_BREAKS)
    except NoMatch:
        return text, ""


def _host_name(text: str, delimiters: str = " ") -> Tuple[str, str]:
    """Extract a trimmed, non-empty host name."""
    name, rest = _take_until(text, delimiters)
    name = name.strip()
    if not name:
        raise NoMatch()
    return name, rest


def parse_battery_mode(text: str) -> Tuple[DsmEvent, str]:
    rest = _tag(text, UPS_DEVICE_PREFIX)
    name, rest = _host_name(rest)
    rest = _tag(rest, BATTERY_MODE_ANCHOR)
    battery_msg, rest = _take_line(rest)
    return UpsBatteryMode(host=Host(name=name, battery_msg=battery_msg.strip())), rest


def parse_low_battery(text: str) -> Tuple[DsmEvent, str]:
    rest = _tag(text, UPS_DEVICE_PREFIX)
    name, rest = _host_name(rest)
    rest = _tag(rest, LOW_BATTERY_ANCHOR)
    return UpsLowBattery(host=Host(name=name)), rest


def parse_test(text: str) -> Tuple[DsmEvent, str]:
    # Test messages put the sentence period right after the host name
    rest = _tag(text, TEST_PREFIX)
    name, rest = _host_name(rest, delimiters=". ")
    rest = _tag(rest, TEST_ANCHOR)
    return Test(host=Host(name=name)), rest


def parse_ac_mode(text: str) -> Tuple[DsmEvent, str]:
    rest = _tag(text, UPS_DEVICE_PREFIX)
    name, rest = _host_name(rest)
    rest = _tag(rest, AC_MODE_ANCHOR)
    return UpsAcMode(host=Host(name=name)), rest


def parse_connection_lost(text: str) -> Tuple[DsmEvent, str]:
    name, rest = _host_name(text)
    rest = _tag(rest, CONNECTION_LOST_ANCHOR)
    return UpsConnectionLost(host=Host(name=name)), rest


def parse_connected(text: str) -> Tuple[DsmEvent, str]:
    name, rest = _host_name(text)
    rest = _tag(rest, CONNECTED_ANCHOR)
    return UpsConnected(host=Host(name=name)), rest


# Battery mode must come before low battery and AC mode: they share a prefix.
RECOGNIZERS: Tuple[Recognizer, ...] = (
    parse_battery_mode,
    parse_low_battery,
    parse_test,
    parse_ac_mode,
    parse_connection_lost,
    parse_connected,
)


def classify(message: str) -> Tuple[DsmEvent, str]:
    """
    Classify a UPS notification.

    Args:
        message: Raw notification text

    Returns:
        (event, remainder) where remainder is the text following the
        recognized notification, untouched

    Raises:
        NoMatch: if the message does not start with a known notification
    """
    for recognizer in RECOGNIZERS:
        try:
            return recognizer(message)
        except NoMatch:
            continue
    raise NoMatch()
