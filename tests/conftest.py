"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from typing import Any

import pytest
from zapctl.core.config import UninstallConfig

from fakes import HOME


@pytest.fixture
def home() -> str:
    """Fixed home directory used by discovery tests."""
    return HOME


@pytest.fixture
def fast_config() -> UninstallConfig:
    """Default configuration without the verification delay."""
    return UninstallConfig(verify_delay_seconds=0)


@pytest.fixture
def sample_info_plist() -> dict[str, Any]:
    """Sample parsed Info.plist of an application bundle."""
    return {
        "CFBundleExecutable": "Bar",
        "CFBundleIdentifier": "com.bar.app",
        "CFBundleName": "Bar",
        "CFBundleDisplayName": "Bar Pro",
        "CFBundleShortVersionString": "2.1.0",
        "LSMinimumSystemVersion": "12.0",
    }
