"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def status_schema() -> dict[str, Any]:
    """Flat object schema: 8-bit id followed by a flag."""
    return {
        "key": "status",
        "type": "object",
        "items": [
            {"key": "vehicle_id", "type": "integer", "bits": 8},
            {"key": "active", "type": "boolean"},
        ],
    }


@pytest.fixture
def telemetry_schema() -> dict[str, Any]:
    """Object schema mixing every block type, nested objects and arrays."""
    return {
        "key": "telemetry",
        "type": "object",
        "items": [
            {"key": "header", "type": "binary", "bits": 8, "value": "a5"},
            {"key": "id", "type": "integer", "bits": 8, "offset": 100},
            {"key": "online", "type": "boolean"},
            {"key": "battery", "type": "float", "bits": 10, "lower": 0, "upper": 100},
            {"key": "reserved", "type": "pad", "bits": 3},
            {"key": "callsign", "type": "string", "length": 6},
            {"key": "temperature", "type": "steps", "steps": [0, 15, 30]},
            {"key": "mode", "type": "categories", "categories": ["idle", "run", "fault"]},
            {"key": "position.x", "type": "integer", "bits": 10},
            {"key": "position.y", "type": "integer", "bits": 10},
            {
                "key": "samples",
                "type": "array",
                "bits": 4,
                "blocks": {
                    "key": "sample",
                    "type": "object",
                    "items": [
                        {"key": "channel", "type": "integer", "bits": 3},
                        {
                            "key": "values",
                            "type": "array",
                            "bits": 3,
                            "blocks": {"key": "value", "type": "integer", "bits": 5},
                        },
                    ],
                },
            },
        ],
    }
