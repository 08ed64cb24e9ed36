"""
Test suite for the UI harness.

This package contains:
- unit/: engine, action layer, config and page object tests (no browser)
- e2e/: browser scenarios against the demo app or an external BASE_URL
- demo_app/: Flask application the e2e scenarios run against
"""
