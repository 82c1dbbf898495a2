"""
Tests for the UPS notification classifier.

Run with: pytest tests/
"""

import pytest

from dsm_ups.events import (
    Host,
    NoMatch,
    RECOGNIZERS,
    Test,
    UpsAcMode,
    UpsBatteryMode,
    UpsConnected,
    UpsConnectionLost,
    UpsLowBattery,
    classify,
)
from dsm_ups.events.parser import (
    parse_ac_mode,
    parse_battery_mode,
    parse_connected,
    parse_connection_lost,
    parse_low_battery,
    parse_test,
)


class TestNotificationTemplates:
    """Each template classifies to its own variant."""

    def test_test_message(self):
        event, remainder = classify("Test Message from COMPUTER1.")
        assert event == Test(host=Host(name="COMPUTER1"))
        assert remainder == ""

    def test_battery_mode(self):
        message = (
            "The UPS device connected to COMPUTER2 has entered battery mode. "
            "The battery level is 99%\n\nFrom COMPUTER2"
        )
        event, remainder = classify(message)
        assert event == UpsBatteryMode(
            host=Host(name="COMPUTER2", battery_msg="The battery level is 99%")
        )
        assert remainder == "\n\nFrom COMPUTER2"

    def test_low_battery(self):
        event, remainder = classify(
            "The UPS device connected to COMPUTER3 has reached low battery."
        )
        assert event == UpsLowBattery(host=Host(name="COMPUTER3"))
        assert event.host.battery_msg is None
        assert remainder == ""

    def test_ac_mode(self):
        event, remainder = classify(
            "The UPS device connected to NAS01 has returned to AC mode.\n\nFrom NAS01"
        )
        assert event == UpsAcMode(host=Host(name="NAS01"))
        assert remainder == "\n\nFrom NAS01"

    def test_connection_lost(self):
        event, remainder = classify("NAS01 has lost the connection to the UPS.")
        assert event == UpsConnectionLost(host=Host(name="NAS01"))
        assert remainder == ""

    def test_connected_with_placeholder_host(self):
        event, remainder = classify(
            "%HOSTNAME% has connected to the UPS device.\n\nFrom %HOSTNAME%"
        )
        assert event == UpsConnected(host=Host(name="%HOSTNAME%"))
        assert remainder == "\n\nFrom %HOSTNAME%"

    def test_host_name_case_preserved(self):
        event, _ = classify("Test Message from MixedCase-Nas.")
        assert event.host.name == "MixedCase-Nas"

    @pytest.mark.parametrize(
        "message",
        [
            "\tNAS01 has connected to the UPS device.",
            "\nNAS01 has lost the connection to the UPS.",
            "The UPS device connected to \tNAS01\t has reached low battery.",
            "Test Message from \tNAS01.",
        ],
    )
    def test_host_name_trimmed(self, message):
        event, _ = classify(message)
        assert event.host.name == "NAS01"

    def test_test_name_stops_at_first_delimiter(self):
        event, remainder = classify("Test Message from NAS.local.")
        assert event == Test(host=Host(name="NAS"))
        assert remainder == "local."

    def test_battery_msg_without_line_break(self):
        event, remainder = classify(
            "The UPS device connected to NAS01 has entered battery mode.  Level 50%  "
        )
        assert event.host.battery_msg == "Level 50%"
        assert remainder == ""

    def test_battery_msg_stops_at_carriage_return(self):
        event, remainder = classify(
            "The UPS device connected to NAS01 has entered battery mode. Level 50%\r\nFrom NAS01"
        )
        assert event.host.battery_msg == "Level 50%"
        assert remainder == "\r\nFrom NAS01"

    def test_remainder_is_not_trimmed(self):
        _, remainder = classify("Test Message from NAS01.  trailing  ")
        assert remainder == "  trailing  "


class TestBatteryMessage:
    """battery_msg is only ever set for battery mode."""

    @pytest.mark.parametrize(
        "message",
        [
            "The UPS device connected to NAS01 has reached low battery. The battery level is 5%",
            "The UPS device connected to NAS01 has returned to AC mode. The battery level is 80%",
            "NAS01 has lost the connection to the UPS. Some more text",
            "NAS01 has connected to the UPS device. Some more text",
            "Test Message from NAS01. Some more text",
        ],
    )
    def test_absent_for_other_variants(self, message):
        event, _ = classify(message)
        assert not isinstance(event, UpsBatteryMode)
        assert event.host.battery_msg is None

    def test_empty_rest_is_present(self):
        event, remainder = classify(
            "The UPS device connected to NAS01 has entered battery mode.\nFrom NAS01"
        )
        assert event.host.battery_msg == ""
        assert remainder == "\nFrom NAS01"


class TestPriority:
    """Recognizer order is load-bearing."""

    def test_recognizer_order(self):
        assert RECOGNIZERS == (
            parse_battery_mode,
            parse_low_battery,
            parse_test,
            parse_ac_mode,
            parse_connection_lost,
            parse_connected,
        )

    def test_battery_mode_wins_over_low_battery(self):
        message = (
            "The UPS device connected to NAS01 has entered battery mode. "
            "The UPS device connected to NAS01 has reached low battery."
        )
        event, remainder = classify(message)
        assert isinstance(event, UpsBatteryMode)
        assert event.host.battery_msg == (
            "The UPS device connected to NAS01 has reached low battery."
        )
        assert remainder == ""

    def test_failed_recognizer_leaves_input_for_next(self):
        # Shares the UPS device prefix with battery mode and low battery
        event, _ = classify("The UPS device connected to NAS01 has returned to AC mode.")
        assert isinstance(event, UpsAcMode)


class TestNoMatch:
    """Inputs outside the templates raise NoMatch."""

    @pytest.mark.parametrize(
        "message",
        [
            "Some random message about something else",
            "",
            "The UPS device connected to NAS01 has exploded.",
            "The UPS device connected to NAS01",
            "Test Message from NAS01",
            "Test Message from NAS01 now.",
            "NAS01 has lost connection to the UPS.",
            "the ups device connected to NAS01 has reached low battery.",
            "\nFrom NAS01",
        ],
    )
    def test_unrecognized(self, message):
        with pytest.raises(NoMatch):
            classify(message)

    @pytest.mark.parametrize(
        "message",
        [
            "The UPS device connected to  has reached low battery.",
            "Test Message from .",
            " has connected to the UPS device.",
        ],
    )
    def test_empty_host_name_rejected(self, message):
        with pytest.raises(NoMatch):
            classify(message)

    def test_single_recognizer_fails_on_other_template(self):
        with pytest.raises(NoMatch):
            parse_low_battery("Test Message from NAS01.")

    def test_classify_is_repeatable(self):
        message = "NAS01 has connected to the UPS device."
        assert classify(message) == classify(message)
