"""Command-line entry point.

Usage:
    python -m noteapp [serve] [--host HOST] [--port PORT]
    python -m noteapp list-notes [--database-url URL]

`serve` runs the API under uvicorn. `list-notes` prints every stored note,
one per line, and exits.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from noteapp.config import Settings


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="noteapp", description="Notes API")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API (default)")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    list_notes = sub.add_parser("list-notes", help="Print every stored note")
    list_notes.add_argument("--database-url", default=None)

    return parser.parse_args(argv)


async def _list_notes(settings: Settings) -> int:
    from noteapp.database import Database
    from noteapp.services.note_service import note_service

    database = Database(settings)
    try:
        async with database.session() as session:
            notes = await note_service.list_notes(session)
    finally:
        await database.dispose()

    for note in notes:
        owner = note.user.username if note.user else "-"
        flag = "!" if note.important else " "
        print(f"{note.id} {flag} {note.date.isoformat()} {owner}: {note.content}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.command == "list-notes":
        overrides = {"database_url": args.database_url} if args.database_url else {}
        return asyncio.run(_list_notes(Settings(**overrides)))

    import uvicorn

    settings = Settings()
    uvicorn.run(
        "noteapp.main:app",
        host=getattr(args, "host", None) or settings.backend_host,
        port=getattr(args, "port", None) or settings.backend_port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
