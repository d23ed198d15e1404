import pytest

from Memory.Schema import RecordSchema


def test_default_names():
    s = RecordSchema.of(float, int)
    assert s.names == ("f0", "f1")
    assert s.arity == 2


def test_make_coerces_and_keeps_objects():
    s = RecordSchema((float, bool, object), ("a", "b", "c"))
    marker = object()
    assert s.make([1, 0, marker]) == (1.0, False, marker)


def test_make_wrong_arity():
    with pytest.raises(ValueError, match="expects 2 values, got 3"):
        RecordSchema.of(int, int).make((1, 2, 3))


def test_names_must_match_types():
    with pytest.raises(ValueError):
        RecordSchema((int,), ("a", "b"))


def test_from_config():
    s = RecordSchema.from_config([{"name": "x", "type": "float"}, "Int", {"type": "str"}])
    assert s.types == (float, int, str)
    assert s.names == ("x", "f1", "f2")


def test_from_config_unknown_type():
    with pytest.raises(ValueError, match="Unknown field type"):
        RecordSchema.from_config(["double"])


def test_from_config_empty():
    with pytest.raises(ValueError):
        RecordSchema.from_config([])
