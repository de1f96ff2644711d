import pytest

from pharmaguard.services.pharmacogenomics.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()
