"""Test configuration helpers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Iterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Ensure the repository root is importable so that ``import core`` and the
# other absolute imports used throughout the codebase resolve from any cwd.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("BACKEND_LOG_LEVEL", "WARNING")


@pytest.fixture(scope="session", autouse=True)
def suppress_asyncio_debug_logging() -> Iterator[None]:
    """Prevent asyncio debug logs from writing to closed pytest capture streams."""

    logger = logging.getLogger("asyncio")
    previous = logger.level
    logger.setLevel(logging.WARNING)
    yield
    logger.setLevel(previous)


@pytest.fixture
def valid_form() -> Dict[str, Any]:
    """A submission that satisfies every constraint."""

    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "I need legal advice about my lease.",
        "privacy": True,
    }


@pytest.fixture
def app() -> FastAPI:
    """Fresh application instance from the factory."""

    from main import create_app

    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
