import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI callback configures structlog globally; undo it between tests."""
    yield
    structlog.reset_defaults()
