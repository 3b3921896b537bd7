import pytest

from echolog.config import settings
from echolog.logging import shutdown_logging


@pytest.fixture(autouse=True)
def fresh_settings():
    """
    Drops cached settings and diagnostic sinks around every test so that
    monkeypatched ECHOLOG_* variables take effect.
    """
    settings.reload()
    yield
    settings.reload()
    shutdown_logging()
