from __future__ import annotations

import io
from collections.abc import Callable

import httpx
import pytest
from rich.console import Console

from adapters.http_client import HttpTransport, build_client
from core.config import AppSettings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url="http://es.test:9200", user_agent="es-aliases-tests")


@pytest.fixture
def trace_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def make_transport(settings: AppSettings, trace_console: Console) -> Callable[[Handler], HttpTransport]:
    def factory(handler: Handler) -> HttpTransport:
        client = build_client(settings, transport=httpx.MockTransport(handler))
        return HttpTransport(client, console=trace_console)

    return factory
