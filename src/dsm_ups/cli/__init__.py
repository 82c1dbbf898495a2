"""
Command line tools for DSM UPS notifications.
"""
