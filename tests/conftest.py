import pytest


@pytest.fixture
def case_insensitive_dict():
    """a mapping type with case-insensitive string keys"""
    requests = pytest.importorskip("requests")
    return requests.structures.CaseInsensitiveDict
