"""
Browser scenarios for the UI harness.

Scenarios request fixtures from the harness plugin and talk to the
application only through page objects.
"""
