"""Pytest configuration and fixtures."""

import asyncio
import os
from collections.abc import Callable

import httpx
import pytest

# Keep real collaborators unconfigured during tests
os.environ["FIRECRAWL_API_KEY"] = ""
os.environ["GOOGLE_API_KEY"] = ""

Routes = dict[str, tuple[int, str] | Exception | float]


def make_transport(routes: Routes) -> httpx.MockTransport:
    """Mock transport serving fixed responses by full URL.

    A route value is (status, body), an exception to raise, or a float delay
    in seconds before a 200 with an empty body. Unknown URLs get a 404.
    """
    requested: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested.append(url)
        route = routes.get(url)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        if isinstance(route, float):
            await asyncio.sleep(route)
            return httpx.Response(200, text="")
        status, body = route
        return httpx.Response(status, text=body)

    transport = httpx.MockTransport(handler)
    transport.requested = requested
    return transport


@pytest.fixture
def transport_factory() -> Callable[[Routes], httpx.MockTransport]:
    """Build a MockTransport for a route table."""
    return make_transport


SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Example Docs</title>
  <meta name="description" content="Example documentation explaining how the widget API works, with guides and references for developers.">
  <meta name="author" content="Jane Doe">
  <meta property="article:published_time" content="2024-01-01">
  <style>body { color: red; }</style>
  <script>window.__next = {};</script>
</head>
<body>
  <header><nav aria-label="Main">Home</nav></header>
  <main>
    <article>
      <h1>Widget API</h1>
      <section>
        <h2>Getting started</h2>
        <p>The widget is easy to use. You can set it up in a few steps. It runs on any site.</p>
        <h3>Install</h3>
        <p>Run the install step. Then add the key. That is all.</p>
      </section>
      <img src="a.png" alt="Widget diagram">
    </article>
  </main>
  <footer role="contentinfo">Footer</footer>
</body>
</html>
"""


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML
