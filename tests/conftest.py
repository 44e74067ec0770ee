import sys

import loguru
import pytest

from handler_chain.utils.storage import ConfigStorage


@pytest.fixture
def log_messages():
    messages = []
    sink_id = loguru.logger.add(lambda msg: messages.append(msg.record), level="DEBUG")
    yield messages
    loguru.logger.remove(sink_id)


@pytest.fixture(autouse=True)
def reset_global_state():
    yield
    ConfigStorage.reset()
    loguru.logger.remove()
    loguru.logger.add(sys.stderr)
