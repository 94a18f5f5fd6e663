"""E2E tests for the User Inyerface game.

These tests drive the live site at INYERFACE_BASE_URL with Playwright.

Tests in this package require:
- Network connectivity to the game
- Browser automation via Playwright (`playwright install chromium`)

Usage:
    INYERFACE_E2E=1 pytest tests/e2e/ -v --tb=short

Note:
    Tests are marked with @pytest.mark.e2e and skipped unless INYERFACE_E2E is set.
"""
