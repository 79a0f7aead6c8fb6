"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def pets_frame() -> bytes:
    """Encoded {"pets": ["cat", "dog"]}."""
    return b"23:4:pets,12:3:cat,3:dog,]}"


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Mixed document covering every wire type."""
    return {
        "one": 1,
        "pi": 3.14,
        "test_german": "Das ist ein test",
        "character": "u",
        "nothing": None,
        "enabled": True,
        "longtext": (
            "Finally, the general rule is senders should have to completely "
            "specify the size of what they send and receivers should be ready "
            "to reject it."
        ),
        "pets": ["cat", "dog", "hamster"],
    }
