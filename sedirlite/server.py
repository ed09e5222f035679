"""TCP server speaking the line-based command protocol."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import functools
import sys

from .commands import CommandError, execute
from .database import Database

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3002


async def handle_client(
    db: Database, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> None:
    """Answer each line read from ``reader`` until the client disconnects."""
    try:
        while line := await reader.readline():
            try:
                text = line.decode("utf-8")
            except UnicodeDecodeError:
                break
            try:
                response = execute(db, text.strip())
            except CommandError as exc:
                response = f"-ERR {exc}\r\n"
            writer.write(response.encode("utf-8"))
            await writer.drain()
    except ConnectionError:
        pass
    finally:
        writer.close()
        with contextlib.suppress(ConnectionError):
            await writer.wait_closed()


async def create_server(
    host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, db: Database | None = None
) -> asyncio.Server:
    """Start listening; every connection shares the one database."""
    database = db if db is not None else Database()
    return await asyncio.start_server(
        functools.partial(handle_client, database), host, port
    )


async def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Run a server until cancelled."""
    print(f'Server starts at "{host}:{port}"', file=sys.stderr)
    server = await create_server(host, port)
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sedirlite", description="In-memory key-value server."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())