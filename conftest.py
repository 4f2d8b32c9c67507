from __future__ import annotations

import pytest


@pytest.fixture
def people_text() -> str:
    return '[{"id":1,"name":"Alice","active":true},{"id":2,"name":"Bob","active":false}]'


@pytest.fixture
def friends_text() -> str:
    return (
        '{"user":"Hartman Tyler","tags":["a","b","c","d"],"friends":['
        '{"id":0,"name":"Anastasia Mclean"},'
        '{"id":1,"name":"Douglas Marshall"},'
        '{"id":2,"name":"Chris Stone"}]}'
    )


@pytest.fixture
def nested_doc() -> dict:
    return {
        "meta": {"source": "api"},
        "data": {
            "items": [
                {"id": 1, "tags": ["x", "y"], "owner": {"name": "Ann", "roles": ["admin"]}},
                {"id": 2, "tags": [], "owner": None},
            ]
        },
    }
