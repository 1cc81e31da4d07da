import pytest

TEST_USERNAME = "testuser"
TEST_PASSWORD = "testpassword"


@pytest.fixture
def mdjotter_client():
    """Provide an MDJotterClient configured with the test credentials.

    It is NOT connected to a real service -- tests should mock httpx calls.
    """
    from mdjotter.client import MDJotterClient

    return MDJotterClient(username=TEST_USERNAME, password=TEST_PASSWORD)


@pytest.fixture
def logged_in_client(mdjotter_client):
    """An MDJotterClient whose session already holds the token ``abc``."""
    mdjotter_client._session.token = "abc"
    return mdjotter_client
