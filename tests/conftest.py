import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collects messages logged by the bencodec package while the test runs."""
    messages = []
    logger.enable('bencodec')
    handler_id = logger.add(lambda msg: messages.append(msg.record['message']), level='DEBUG')
    yield messages
    logger.remove(handler_id)
    logger.disable('bencodec')
