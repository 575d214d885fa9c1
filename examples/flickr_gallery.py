#!/usr/bin/env python3
"""
Flickr gallery example.

Demonstrates:
- Building a pointfree pipeline from curried helpers
- Keeping the network fetch and the page rendering outside the pipeline,
  as injected collaborators
- Running the impure parts only when a Task is forked

The fetch collaborator here serves a canned feed after a short delay so the
example runs offline; any ``fetch_json(url) -> Task`` can replace it.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable
from urllib.parse import quote

from functorkit import (
    LoggingTracer,
    Task,
    TaskExecution,
    Tracer,
    compose,
    join,
    map_list,
    prop,
    trace,
)

FetchJson = Callable[[str], Task[Exception, Any]]
SetHtml = Callable[[str, str], None]

FEED_URL = "https://api.flickr.com/services/feeds/photos_public.gne?tags={}&format=json"


def feed_url(term: str) -> str:
    return FEED_URL.format(quote(term))


def img(src: str) -> str:
    return f'<img src="{src}" />'


media_url = compose(prop("m"), prop("media"))

srcs = compose(map_list(media_url), prop("items"))

images = compose(join(""), map_list(img), srcs)


def app(
    fetch_json: FetchJson,
    set_html: SetHtml,
    tracer: Tracer,
    selector: str = "body",
) -> Callable[[str], TaskExecution[Exception, None]]:
    """Wire the pure pipeline to its collaborators.

    Returns a function that, given a search term, fetches the feed and
    renders its images into ``selector``. The fetched feed is traced
    under the "feed" tag.
    """

    def render(html: str) -> None:
        set_html(selector, html)

    def search(term: str) -> TaskExecution[Exception, None]:
        return (
            fetch_json(feed_url(term))
            .map(trace(tracer, "feed"))
            .map(images)
            .map(render)
            .fork(lambda error: set_html(selector, f"<p>{error}</p>"), lambda _: None)
        )

    return search


def canned_fetch_json(url: str) -> Task[Exception, Any]:
    """Serve a fixed two-photo feed after a short delay."""
    feed = {
        "items": [
            {"media": {"m": "https://live.staticflickr.com/1/tron_m.jpg"}},
            {"media": {"m": "https://live.staticflickr.com/2/legacy_m.jpg"}},
        ]
    }

    def computation(reject: Callable[[Exception], None], resolve: Callable[[Any], None]) -> None:
        asyncio.get_running_loop().call_later(0.1, resolve, feed)

    return Task(computation)


async def main() -> None:
    """Render the canned feed to stdout."""
    rendered = asyncio.get_running_loop().create_future()

    def set_html(selector: str, html: str) -> None:
        print(f"{selector}: {html}")
        rendered.set_result(html)

    app(canned_fetch_json, set_html, LoggingTracer())("tron")
    await rendered


if __name__ == "__main__":
    asyncio.run(main())
