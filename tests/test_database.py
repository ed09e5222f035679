import pytest

from sedirlite.database import Database


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db(clock):
    return Database(clock=clock)


def test_set_and_get(db):
    db.set("name", "alice")
    assert db.get("name") == "alice"
    db.set("name", "bob")
    assert db.get("name") == "bob"


def test_get_missing_is_none(db):
    assert db.get("missing") is None


def test_ttl_expiry(db, clock):
    db.set("k", "v", ttl=10)
    clock.now += 10
    assert db.is_expired("k") is False
    assert db.get("k") == "v"
    clock.now += 1
    assert db.is_expired("k") is True
    assert db.get("k") is None
    assert db.delete("k") is False


def test_set_without_ttl_keeps_previous_expiry(db, clock):
    db.set("k", "v", ttl=5)
    db.set("k", "w")
    clock.now += 6
    assert db.get("k") is None


def test_negative_ttl_rejected(db):
    with pytest.raises(ValueError):
        db.set("k", "v", ttl=-1)


def test_delete(db, clock):
    db.set("k", "v", ttl=5)
    assert db.delete("k") is True
    assert db.delete("k") is False
    assert db.is_expired("k") is False
    db.set("k", "again")
    clock.now += 100
    assert db.get("k") == "again"


def test_list_push_pop(db):
    db.rpush("l", "b")
    db.lpush("l", "a")
    db.rpush("l", "c")
    assert db.lrange(0, 2, "l") == ["a", "b", "c"]
    assert db.lpop("l") == "a"
    assert db.rpop("l") == "c"
    assert db.lrange(0, 5, "l") == ["b"]


def test_list_missing_key(db):
    assert db.lpop("none") is None
    assert db.rpop("none") is None
    assert db.lrange(0, 1, "none") is None


def test_list_stays_after_emptied(db):
    db.lpush("l", "x")
    assert db.lpop("l") == "x"
    assert db.lpop("l") is None
    assert db.lrange(0, 0, "l") == []


def test_namespaces_are_separate(db):
    db.set("k", "string")
    db.lpush("k", "item")
    db.sadd("k", "member")
    db.zadd("k", 1.0, "z")
    assert db.get("k") == "string"
    assert db.lrange(0, 0, "k") == ["item"]
    assert db.sismember("k", "member") is True
    assert db.zscore("k", "z") == 1.0


def test_sets(db):
    assert db.sadd("s", "a") is True
    assert db.sadd("s", "a") is False
    assert db.sadd("s", "b") is True
    assert sorted(db.smembers("s")) == ["a", "b"]
    assert db.sismember("s", "a") is True
    assert db.srem("s", "a") is True
    assert db.srem("s", "a") is False
    assert db.sismember("s", "a") is False


def test_sets_missing_key(db):
    assert db.smembers("none") is None
    assert db.srem("none", "a") is False
    assert db.sismember("none", "a") is False


def test_sorted_sets(db):
    assert db.zadd("z", 2.0, "b") is True
    assert db.zadd("z", 1.0, "a") is True
    assert db.zadd("z", 1.0, "a") is False
    assert db.zrange("z", 0, 1) == ["a", "b"]
    assert db.zscore("z", "b") == 2.0
    assert db.zrem("z", "b") is True
    assert db.zrem("z", "b") is False
    assert db.zscore("z", "b") is None
    assert db.zrange("z", 0, 10) == ["a"]


def test_sorted_sets_missing_key(db):
    assert db.zrange("none", 0, 1) is None
    assert db.zscore("none", "a") is None
    assert db.zrem("none", "a") is False


def test_default_clock_expiry_not_immediate():
    store = Database()
    store.set("k", "v", ttl=3600)
    assert store.get("k") == "v"