"""Object model tests: display, type names and map keys."""

import pytest

from monkey.object import (
    Integer, Boolean, String, Null, Array, Map, MapKey, MapPair, ReturnValue,
    Builtin, EvaluationError, LET, DEFAULT, NULL, TRUE, FALSE,
)


@pytest.mark.parametrize("obj, inspected, type_name", [
    (Integer(5), "5", "Integer"),
    (TRUE, "true", "Boolean"),
    (FALSE, "false", "Boolean"),
    (String("hi"), "hi", "String"),
    (NULL, "null", "Null"),
    (Array([Integer(1), String("a")]), "[1, a]", "Array"),
    (ReturnValue(Integer(3)), "3", "Return"),
    (EvaluationError("boom"), "ERROR: boom", "Error"),
])
def test_inspect_and_type(obj, inspected, type_name):
    assert obj.inspect() == inspected
    assert obj.type() == type_name


def test_describe_adds_the_type():
    assert Integer(5).describe() == "5 : Integer"
    assert String("s").describe() == "s : String"
    assert NULL.describe() == "Null"


def test_hash_keys_match_by_content():
    assert String("name").hash_key() == String("name").hash_key()
    assert Integer(1).hash_key() == Integer(1).hash_key()
    assert Boolean(True).hash_key() == TRUE.hash_key()
    assert String("1").hash_key() != Integer(1).hash_key()
    assert Integer(1).hash_key() != TRUE.hash_key()
    assert hash(String("x").hash_key()) == hash(String("x").hash_key())


def test_other_objects_are_unusable_keys():
    for obj in (NULL, Array([]), Map(), Builtin(len, "len")):
        key = obj.hash_key()
        assert not key.usable
        assert key.kind == MapKey.UNUSABLE
        assert key.value == obj.type()


def test_map_keys_are_orderable():
    keys = [String("b").hash_key(), TRUE.hash_key(), Integer(2).hash_key(),
            String("a").hash_key(), Integer(1).hash_key()]
    ordered = sorted(keys)
    assert [(k.kind, k.value) for k in ordered] == [
        ("Integer", 1), ("Integer", 2), ("Boolean", True), ("String", "a"), ("String", "b"),
    ]


def test_map_get_and_inspect():
    key = String("k")
    m = Map({key.hash_key(): MapPair(key, Integer(9))})
    assert m.get(String("k")).value == 9
    assert m.get(String("missing")) is None
    assert m.inspect() == "{k: 9}"
    assert Map().inspect() == "{}"


def test_sentinels_are_distinct_internal_values():
    assert LET is not DEFAULT
    assert LET.type() == "Let"
    assert DEFAULT.type() == "Default"
    assert LET.inspect() == ""
