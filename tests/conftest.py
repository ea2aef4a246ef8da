"""Shared pytest fixtures for jsonshape tests."""

import json

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_document():
    """Return a decoded API-response-like document."""
    return {
        "id": 42,
        "name": "widget",
        "active": True,
        "owner": None,
        "tags": ["a", "b", "c"],
        "dimensions": {"width": 1.5, "height": 2},
        "history": [
            {"at": "2024-01-15", "by": "alice"},
            {"at": "2024-01-16", "by": "bob", "note": "ignored"},
        ],
    }


@pytest.fixture
def sample_json_file(temp_dir, sample_document):
    """Write the sample document to a JSON file."""
    json_file = temp_dir / "response.json"
    json_file.write_text(json.dumps(sample_document), encoding="utf-8")
    return json_file


SAMPLE_SCHEMA = """{
  "id": number,
  "name": string,
  "active": boolean,
  "owner": null,
  "tags": [
    string
  ],
  "dimensions": {
    "width": number,
    "height": number
  },
  "history": [
    {
      "at": string,
      "by": string
    }
  ]
}"""


@pytest.fixture
def sample_schema():
    """Expected default rendering of the sample document."""
    return SAMPLE_SCHEMA
