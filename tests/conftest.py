from __future__ import annotations

import json
import random
from typing import Callable

import httpx
import pytest

from seo_publisher.config import WordPressConfig
from seo_publisher.core.context import ToolContext
from seo_publisher.core.dispatcher import Dispatcher
from seo_publisher.core.wordpress_client import WordPressClient
from seo_publisher.tools.registry import registry
import seo_publisher.tools.seo_tools  # noqa: F401
import seo_publisher.tools.wordpress_tools  # noqa: F401

WP_CONFIG = WordPressConfig(
    site_url="https://blog.example.org",
    username="editor",
    app_password="abcd efgh",
    timeout=5.0,
)


def make_wordpress(handler: Callable[[httpx.Request], httpx.Response]) -> WordPressClient:
    return WordPressClient(WP_CONFIG, transport=httpx.MockTransport(handler))


def make_dispatcher(wordpress=None, seed: int | None = 7, strict: bool = True) -> Dispatcher:
    context = ToolContext(wordpress=wordpress, rng=random.Random(seed))
    return Dispatcher(registry, context, strict_arguments=strict)


def call_line(name: str, arguments, request_id=1) -> str:
    return json.dumps(
        {
            "jsonrpc": "2.0",
            "id": request_id,
            "method": "tools/call",
            "params": {"name": name, "arguments": arguments},
        }
    )


@pytest.fixture()
def dispatcher() -> Dispatcher:
    return make_dispatcher()
