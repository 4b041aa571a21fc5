"""Search Hacker News stories from the command line."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from hnsearch.config.loader import load_config
from hnsearch.search.controller import SearchController
from hnsearch.search.models import SORT_MODES, Record, ViewState


def _blank(value: object) -> object:
    return value if value is not None else ""


def render_record(record: Record) -> str:
    title, url, author, comments, points = (
        _blank(value)
        for value in (record.title, record.url, record.author, record.comment_count, record.score)
    )
    return f"{title}: {url}, {author}, {comments}, {points}"


def render(title: str, view: ViewState, records: Iterable[Record]) -> str:
    lines = [f"Hey {title}", ""]
    if view.has_error:
        lines.append("Something went wrong ...")
    elif view.is_loading:
        lines.append("Loading ...")
    else:
        rendered = [render_record(record) for record in records]
        lines.extend(rendered or ["No stories found."])
    return "\n".join(lines)


async def run_search(controller: SearchController, term: str | None) -> ViewState:
    if term is not None:
        controller.on_term_change(term)
    return await controller.submit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("term", nargs="?", default=None, help="search term (defaults to the last one used)")
    parser.add_argument("--sort", choices=SORT_MODES, default="none")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    config = load_config(args.config)
    controller = SearchController.from_config(config)
    controller.sort_mode = args.sort

    view = asyncio.run(run_search(controller, args.term))
    print(render(config.title, view, controller.visible_records()))
    return 1 if view.has_error else 0


if __name__ == "__main__":
    raise SystemExit(main())
