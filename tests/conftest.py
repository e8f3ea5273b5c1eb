"""Pytest configuration and shared fixtures for the wechatmd test suite.

This module registers the custom markers, selects the Hypothesis profile and
provides fixtures shared across the unit and integration tests.
"""

import copy
import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from wechatmd.theme.presets import TECH_MINIMAL, get_builtin_theme
from wechatmd.theme.schema import ThemeDefinition

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def tech_minimal() -> ThemeDefinition:
    """Provide the default built-in theme."""
    return get_builtin_theme("tech-minimal")


@pytest.fixture
def theme_data() -> dict[str, Any]:
    """Provide a mutable copy of the tech-minimal theme mapping.

    Returns
    -------
    dict
        Deep copy that tests may modify freely

    """
    return copy.deepcopy(TECH_MINIMAL)


@pytest.fixture
def sample_markdown() -> str:
    """Provide a small article exercising most of the supported syntax."""
    return (
        "---\n"
        "title: 示例文章\n"
        "---\n"
        "\n"
        "# 标题\n"
        "\n"
        "这是 ==重点== 提醒，访问 [官网](https://example.com)。\n"
        "\n"
        "> 引用内容\n"
        "\n"
        "- 第一项\n"
        "- 第二项\n"
        "\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
        "\n"
        "| 名称 | 数量 |\n"
        "| :--- | ---: |\n"
        "| 苹果 | 3 |\n"
    )
