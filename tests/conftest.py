"""Pytest configuration and fixtures."""

import pytest
import json
from dto_generator.config import GeneratorConfig
from dto_generator.generator import DtoGenerator


@pytest.fixture
def generator():
    """Generator with default configuration."""
    return DtoGenerator(GeneratorConfig())


@pytest.fixture
def sample_user_json():
    """Flat object with a scalar array field."""
    return json.dumps({"id": 1, "name": "Alice", "tags": ["a", "b"]})


@pytest.fixture
def sample_list_json():
    """Root array of objects with partially overlapping keys."""
    return json.dumps([
        {"id": 1},
        {"id": 2, "extra": "x"},
    ])


@pytest.fixture
def sample_shared_shape_json():
    """Two parents holding objects with the same key set."""
    return json.dumps({
        "first": {"a": {"x": 1, "y": 2}},
        "second": {"b": {"x": 3, "y": 4}},
    })


@pytest.fixture
def sample_nested_json():
    """Nested objects and arrays of objects several levels deep."""
    return json.dumps({
        "id": 7,
        "created_at": "2024-01-05T10:00:00Z",
        "owner": {"name": "Bob", "email": "bob@example.com"},
        "orders": [
            {"id": 1, "total": 9.5, "items": [{"sku": "A", "qty": 1}]},
            {"id": 2, "total": 3.25, "items": [{"sku": "B", "qty": 4, "note": "gift"}]},
        ],
        "flags": [True, False],
        "scores": [1, 2.5, None],
    })
