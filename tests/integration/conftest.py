from collections.abc import Generator
from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from doc_extractor.api.app import create_app
from doc_extractor.config.settings import Settings
from doc_extractor.ocr.base import BaseOcrEngine
from doc_extractor.processor.processor import build_processor


def _build_app(settings: Settings, reference_time: datetime, ocr_engine: BaseOcrEngine) -> FastAPI:
    processor = build_processor(
        settings,
        clock=lambda: reference_time,
        ocr_engine=ocr_engine,
    )
    return create_app(settings, processor)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(_env_file=None, extraction_timeout_seconds=10, extraction_max_workers=2)


@pytest.fixture()
def client(
    test_settings: Settings,
    reference_time: datetime,
    fake_ocr: BaseOcrEngine,
) -> Generator[TestClient, None, None]:
    with TestClient(_build_app(test_settings, reference_time, fake_ocr)) as test_client:
        yield test_client


@pytest.fixture()
def prefixed_client(
    reference_time: datetime,
    fake_ocr: BaseOcrEngine,
) -> Generator[TestClient, None, None]:
    settings = Settings(_env_file=None, api_prefix="/api")
    with TestClient(_build_app(settings, reference_time, fake_ocr)) as test_client:
        yield test_client
