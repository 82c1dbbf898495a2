"""
DSM UPS - classifier for Synology DSM UPS notifications

This package turns the fixed English notifications DSM sends about its UPS
(battery mode, low battery, AC restored, connection lost/restored, test
messages) into typed events that an alerting pipeline can route.

Main modules:
- events: event models and the notification classifier
- notifications: caller-side normalization and logging of notifications
- cli: dsmupsctl command line tool
"""

__version__ = "0.1.0"
__author__ = "DSM UPS Team"

__all__ = ["__version__", "__author__"]
