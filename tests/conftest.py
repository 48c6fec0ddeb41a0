# tests/conftest.py
import pytest

from circbuf.core import log
from circbuf.core.buffer import RingBuffer


@pytest.fixture(scope="session", autouse=True)
def _bootstrap_logging():
    # Setup logging (reads LOG_LEVEL / LOG_JSON / .env if available)
    log.setup()
    yield


@pytest.fixture()
def buf3() -> RingBuffer[int]:
    return RingBuffer(3)
