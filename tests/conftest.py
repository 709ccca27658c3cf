import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture loguru records as (level, message) pairs."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
