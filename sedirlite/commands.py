"""Parsing and execution of text commands against a :class:`Database`."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from decimal import Decimal

from .database import Database

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1

OK = "+OK\r\n"
NIL = "$-1\r\n"
UNKNOWN = "-ERR\r\nUnknow commnd, please try again!!"


class CommandError(Exception):
    """Raised when a command's arguments cannot be parsed or applied."""


def _parse_unsigned(token: str, message: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise CommandError(message)
    value = int(token)
    if value > _U64_MAX:
        raise CommandError(message)
    return value


def _parse_score(token: str) -> float:
    if "_" in token or token != token.strip():
        raise CommandError("Invalid score")
    try:
        return float(token)
    except ValueError:
        raise CommandError("Invalid score") from None


def _format_score(score: float) -> str:
    """Render a score as its shortest exact decimal, without exponent."""
    if math.isnan(score):
        return "NaN"
    if math.isinf(score):
        return "inf" if score > 0 else "-inf"
    if score.is_integer():
        text = str(int(score))
        return "-0" if score == 0 and math.copysign(1.0, score) < 0 else text
    return format(Decimal(repr(score)), "f")


def _bulk(value: str) -> str:
    return f"${len(value.encode())}\r\n{value}\r\n"


def _array(items: Iterable[str]) -> str:
    items = list(items)
    return f"*{len(items)}\r\n" + "".join(_bulk(item) for item in items)


def _flag(prefix: str, value: bool) -> str:
    return f"{prefix}{1 if value else 0}\r\n"


def execute(db: Database, command: str) -> str:
    """Run one command line against ``db`` and return the wire response.

    Raises :class:`CommandError` when an argument is malformed.
    """
    try:
        return _dispatch(db, command.split())
    except ValueError as exc:
        raise CommandError(str(exc)) from None


def _dispatch(db: Database, parts: list[str]) -> str:
    match parts:
        case ["SET", key, value, "EXP", ttl]:
            seconds = _parse_unsigned(ttl, "Invalid time to live value")
            db.set(key, value, seconds)
            return OK
        case ["SET", key, value]:
            db.set(key, value, None)
            return OK
        case ["GET", key]:
            found = db.get(key)
            return _bulk(found) if found is not None else NIL
        case ["DEL", key]:
            return NIL if db.delete(key) else "$-0\r\n"

        case ["LPUSH", key, value]:
            db.lpush(key, value)
            return OK
        case ["RPUSH", key, value]:
            db.rpush(key, value)
            return OK
        case ["LPOP", key]:
            popped = db.lpop(key)
            return _bulk(popped) if popped is not None else OK
        case ["RPOP", key]:
            popped = db.rpop(key)
            return _bulk(popped) if popped is not None else OK
        case ["LRANGE", start, end, key]:
            first = _parse_unsigned(start, "Invalid start index")
            last = _parse_unsigned(end, "Invalid start index")
            items = db.lrange(first, last, key)
            return _array(items) if items is not None else "NOT FOUND\r\n"

        case ["SADD", key, value]:
            return _flag("$", db.sadd(key, value))
        case ["SREM", key, value]:
            return _flag("$", db.srem(key, value))
        case ["SMEMBERS", key]:
            members = db.smembers(key)
            return _array(members) if members is not None else "NOT FOUND\r\n"
        case ["SISMEMBER", key, member]:
            return "$FOUND!\r\n" if db.sismember(key, member) else "$NOT FOUND!\r\n"

        case ["ZADD", score, member, key]:
            return _flag(":", db.zadd(key, _parse_score(score), member))
        case ["ZREM", key, member]:
            return _flag(":", db.zrem(key, member))
        case ["ZRANGE", key, start, end]:
            first = _parse_unsigned(start, "Invalid start index")
            last = _parse_unsigned(end, "Invalid end index")
            members = db.zrange(key, first, last)
            return _array(members) if members is not None else NIL
        case ["ZSCORE", key, member]:
            score = db.zscore(key, member)
            return _bulk(_format_score(score)) if score is not None else NIL

        case _:
            return UNKNOWN