from zcw.runtime import UNDEFINED, Environment


def test_lookup_missing_name_is_undefined() -> None:
    env = Environment()

    assert env.lookup("page") is UNDEFINED
    assert not UNDEFINED
    assert "page" not in env


def test_bind_overwrites() -> None:
    env = Environment()
    env.bind("page", 1)
    env.bind("page", 2)

    assert env.lookup("page") == 2
    assert len(env) == 1


def test_none_is_a_real_binding() -> None:
    env = Environment()
    env.bind("page", None)

    assert env.contains("page")
    assert env.lookup("page") is None


def test_snapshot_is_detached() -> None:
    env = Environment()
    env.bind("a", 1)

    snapshot = env.snapshot()
    env.bind("b", 2)

    assert snapshot == {"a": 1}
    assert env.names() == ["a", "b"]
    assert list(env) == ["a", "b"]


def test_clear() -> None:
    env = Environment()
    env.bind("a", 1)
    env.clear()

    assert len(env) == 0
    assert env.lookup("a") is UNDEFINED
