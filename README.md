# sedirlite

A small in-memory key-value server that speaks a simple line-based text
protocol. It keeps string values (with optional expiry), lists, sets and
sorted sets, and answers many clients at once over TCP using asyncio.
Every connection shares the same database.

## Installing

    pip install .

## Running the server

    sedirlite

By default the server listens on `127.0.0.1:3002`. The options are
`--host` and `--port`:

    sedirlite --host 0.0.0.0 --port 4000

Press Ctrl+C to stop it.

## Talking to it

Send one command per line. Any TCP client works, for example:

    $ nc 127.0.0.1 3002
    SET greeting hello
    +OK
    GET greeting
    $5
    hello

### Commands

| Command | Effect |
| --- | --- |
| `SET key value` | store a string |
| `SET key value EXP seconds` | store a string that expires after the given number of seconds |
| `GET key` | read a string (`$-1` if missing or expired) |
| `DEL key` | remove a string (`$-1` if it was there, `$-0` if not) |
| `LPUSH key value` / `RPUSH key value` | push onto the front / back of a list |
| `LPOP key` / `RPOP key` | pop from the front / back of a list (`+OK` if there is nothing to pop) |
| `LRANGE start end key` | items `start` to `end` (inclusive) of a list |
| `SADD key value` / `SREM key value` | add to / remove from a set (`$1` if the set changed, `$0` if not) |
| `SMEMBERS key` | all members of a set, in no particular order |
| `SISMEMBER key member` | `$FOUND!` or `$NOT FOUND!` |
| `ZADD score member key` | add or re-score a member of a sorted set (`:1` / `:0`) |
| `ZREM key member` | remove a member from a sorted set (`:1` / `:0`) |
| `ZRANGE key start end` | members `start` to `end` (inclusive), ordered by score then name |
| `ZSCORE key member` | a member's score |

Strings, lists, sets and sorted sets each live in their own namespace, so
the same key may name one of each.

Arrays come back as `*count` followed by one `$length` / value pair per item.
`LRANGE` and `SMEMBERS` on a missing key answer `NOT FOUND`; `ZRANGE` and
`ZSCORE` on a missing key answer `$-1`. An unknown command gets an `-ERR`
reply, and a malformed number in a command gets `-ERR` followed by the reason.

## Using it from Python

The storage and the command layer can be used without the network. Both are
plain synchronous calls:

    from sedirlite.database import Database
    from sedirlite.commands import CommandError, execute

    db = Database()
    db.rpush("queue", "a")
    db.rpush("queue", "b")
    print(db.lrange(0, 1, "queue"))            # ['a', 'b']
    print(repr(execute(db, "ZADD 1.5 alice board")))  # ':1\r\n'

    try:
        execute(db, "LRANGE x 1 queue")
    except CommandError as exc:
        print(exc)                             # Invalid start index

`Database` accepts a `clock` callable (default `time.monotonic`) that is used
to decide when keys set with a time to live expire.

The value types `RList`, `RSet` and `SortedSet` in `sedirlite.structures`
can also be used on their own.

In your own asyncio code, `await sedirlite.server.serve(host, port)` runs the
server until cancelled, and `await sedirlite.server.create_server(host, port, db)`
returns the `asyncio.Server` for you to manage, optionally around a
`Database` you supply.

## What it does not do

Everything is held in memory only: nothing is written to disk, and all data
is gone when the server stops. There is no authentication, no replication
and no way to list or scan keys.

## Tests

    pip install .[test]
    pytest