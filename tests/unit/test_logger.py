import logging
from collections.abc import Generator

import pytest

from doc_extractor.logging.logger import Log


@pytest.fixture()
def restore_logger() -> Generator[logging.Logger, None, None]:
    logger = logging.getLogger("doc_extractor")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


class TestConfigure:
    def test_sets_level(self, restore_logger: logging.Logger) -> None:
        Log.configure("debug")

        assert restore_logger.level == logging.DEBUG

    def test_adds_single_handler_when_called_twice(self, restore_logger: logging.Logger) -> None:
        restore_logger.handlers = []

        Log.configure("info")
        Log.configure("warning")

        assert len(restore_logger.handlers) == 1
        assert restore_logger.level == logging.WARNING


class TestMessages:
    @pytest.mark.parametrize(
        ("method", "level"),
        [
            (Log.info, logging.INFO),
            (Log.error, logging.ERROR),
            (Log.warning, logging.WARNING),
            (Log.debug, logging.DEBUG),
        ],
    )
    def test_forwards_to_named_logger(
        self,
        restore_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
        method,
        level: int,
    ) -> None:
        restore_logger.setLevel(logging.DEBUG)

        with caplog.at_level(logging.DEBUG, logger="doc_extractor"):
            method("stored document 7")

        records = [r for r in caplog.records if r.name == "doc_extractor"]
        assert [(r.levelno, r.getMessage()) for r in records] == [(level, "stored document 7")]

    @pytest.mark.parametrize("method", [Log.info, Log.error, Log.warning, Log.debug, Log.exception])
    def test_methods_are_documented(self, method) -> None:
        assert method.__doc__
