"""Pytest configuration for the deferredtext test suite.

Hypothesis profiles:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples, derandomized
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from deferredtext import RenderContext, ResourceTable
from tests.helpers.resources import (
    FILES,
    GREETING,
    GREETING_NAMED,
    HTML_NOTICE,
    ITEMS,
    PAGE_OF,
    RecordingResources,
)

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev"
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# RESOURCE FIXTURES
# =============================================================================


@pytest.fixture
def recording() -> RecordingResources:
    """Empty RecordingResources; tests fill in the entries they need."""
    return RecordingResources()


@pytest.fixture
def table() -> ResourceTable:
    """English resource table covering every descriptor variant."""
    return ResourceTable(
        strings={
            GREETING: "Hello",
            GREETING_NAMED: "Hello, {}!",
            HTML_NOTICE: "<b>Heads up:</b> read the <a href=\"https://example.org\">docs</a>",
            PAGE_OF: "Page {0} of {1}",
        },
        plurals={
            ITEMS: {"one": "{} item", "other": "{} items"},
            FILES: {"one": "<b>{0}</b> file from {1}", "other": "<b>{0}</b> files from {1}"},
        },
        locale="en_US",
    )


@pytest.fixture
def context(table: ResourceTable) -> RenderContext:
    """RenderContext over the English table with the default HTML formatter."""
    return RenderContext(table)
