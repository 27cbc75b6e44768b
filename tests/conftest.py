import pytest

from cinema_manager.factories import StandardCreator


@pytest.fixture
def inception():
    """Standard content item used across schedule tests"""
    return StandardCreator().create_item("Inception")
