"""Tests for the RandKey generator."""

import string
from collections import Counter

import pytest

from randkey import (
    CharClass,
    DeleteNonexistent,
    InconsistentComposition,
    InvalidCharacter,
    InvalidNumber,
    InvalidUnit,
    MissingCharacter,
    RandKey,
    RandKeyConfig,
    SetKeyOp,
    from_text,
    generate_key,
)
from randkey.pool import classify, composition


def _assert_composition(key, ltr, sbl, num):
    assert composition(key) == {
        CharClass.ALPHABETIC: ltr,
        CharClass.PUNCTUATION: sbl,
        CharClass.DIGIT: num,
    }


def test_new_generator_is_empty():
    rand_key = RandKey("10", "2", "3")
    assert rand_key.key == ""
    assert rand_key.is_empty()
    assert rand_key.unit() == "65535"
    assert [rand_key.get_cnt(kind) for kind in CharClass] == ["10", "2", "3"]


def test_bad_counts_rejected():
    with pytest.raises(InvalidNumber):
        RandKey("10", "two", "3")
    with pytest.raises(InvalidNumber):
        RandKey("-1", "0", "0")


def test_two_digits_from_custom_pool():
    rand_key = RandKey("0", "0", "2")
    rand_key.replace_data(["1", "2"])
    key = rand_key.generate()
    assert len(key) == 2
    assert set(key) <= {"1", "2"}
    assert rand_key.key == key
    assert rand_key.length() == "2"


def test_default_pools_generate_requested_length():
    rand_key = RandKey("10", "2", "3")
    rand_key.generate()
    assert len(rand_key) == 15
    assert rand_key.length() == "15"
    _assert_composition(rand_key.key, 10, 2, 3)
    assert str(rand_key) == rand_key.key


def test_every_character_comes_from_its_class_pool():
    rand_key = RandKey("40", "30", "20")
    rand_key.replace_data("abc!?789")
    rand_key.generate()
    for ch in rand_key.key:
        assert ch in rand_key.data(classify(ch))
    _assert_composition(rand_key.key, 40, 30, 20)


def test_replace_missing_class_fails_and_keeps_pools():
    rand_key = RandKey("10", "2", "3")
    with pytest.raises(MissingCharacter):
        rand_key.replace_data(["1"])
    assert rand_key.data(CharClass.ALPHABETIC) == list(string.ascii_letters)
    rand_key.replace_data(["1", "a", "."])
    assert rand_key.all_data() == [["a"], ["."], ["1"]]


def test_zero_unit_rejected():
    rand_key = RandKey("10", "2", "3")
    with pytest.raises(InvalidUnit):
        rand_key.set_unit("0")
    with pytest.raises(InvalidNumber):
        rand_key.set_unit("ten")
    assert rand_key.unit() == "65535"


def test_delete_nonexistent():
    rand_key = RandKey("0", "0", "2")
    rand_key.replace_data(["1", "2"])
    with pytest.raises(DeleteNonexistent):
        rand_key.del_item(["9"])
    rand_key.del_item(["1"])
    assert rand_key.data(CharClass.DIGIT) == ["2"]


def test_invalid_character_rejected():
    rand_key = RandKey("1", "1", "1")
    with pytest.raises(InvalidCharacter):
        rand_key.add_item(["🦀"])
    with pytest.raises(InvalidCharacter):
        rand_key.replace_data(["ab"])


def test_small_unit_many_chunks():
    rand_key = RandKey("100", "37", "64")
    rand_key.set_unit("7")
    rand_key.generate()
    _assert_composition(rand_key.key, 100, 37, 64)


def test_failed_generation_keeps_previous_key():
    rand_key = RandKey("5", "0", "0")
    previous = rand_key.generate()
    rand_key.clear(CharClass.ALPHABETIC)
    with pytest.raises(MissingCharacter):
        rand_key.generate()
    assert rand_key.key == previous


def test_zero_counts_allow_empty_pools():
    rand_key = RandKey("0", "0", "0")
    rand_key.clear_all()
    assert rand_key.generate() == ""
    assert rand_key.is_empty()


def test_clear_then_data_is_empty():
    rand_key = RandKey("0", "0", "0")
    rand_key.clear(CharClass.DIGIT)
    assert rand_key.data(CharClass.DIGIT) == []
    assert rand_key.data(CharClass.ALPHABETIC) != []


def test_add_item_to_cleared_pools():
    rand_key = RandKey("10", "2", "3")
    rand_key.clear_all()
    rand_key.add_item(["a", "0", "-"])
    key = rand_key.join()
    assert Counter(key) == Counter({"a": 10, "-": 2, "0": 3})


def test_set_cnt():
    rand_key = RandKey("10", "2", "3")
    rand_key.set_cnt(CharClass.ALPHABETIC, "20")
    rand_key.set_cnt(CharClass.PUNCTUATION, "1000")
    rand_key.set_cnt(CharClass.DIGIT, "0")
    assert [rand_key.get_cnt(kind) for kind in CharClass] == ["20", "1000", "0"]
    with pytest.raises(InvalidNumber):
        rand_key.set_cnt(CharClass.DIGIT, "x")
    assert rand_key.get_cnt(CharClass.DIGIT) == "0"


def test_huge_counts_are_kept_exactly():
    huge = "123456789012345678901234567890"
    rand_key = RandKey(huge, "0", "0")
    assert rand_key.get_cnt(CharClass.ALPHABETIC) == huge


def test_seeded_generation_is_reproducible_across_worker_counts():
    one = RandKey("300", "120", "80", config=RandKeyConfig(unit=16, max_workers=1))
    many = RandKey("300", "120", "80", config=RandKeyConfig(unit=16, max_workers=6))
    assert one.generate(seed=1234) == many.generate(seed=1234)


def test_unseeded_generations_differ():
    rand_key = RandKey("32", "16", "16")
    assert rand_key.generate() != rand_key.generate()


def test_set_key_update_adopts_composition():
    rand_key = RandKey("10", "2", "3")
    rand_key.set_key("123456", SetKeyOp.UPDATE)
    assert rand_key.key == "123456"
    assert [rand_key.get_cnt(kind) for kind in CharClass] == ["0", "0", "6"]


def test_set_key_check():
    rand_key = RandKey("10", "2", "3")
    rand_key.set_key("]EH1zyqx3Bl/F8a", SetKeyOp.CHECK)
    assert rand_key.key == "]EH1zyqx3Bl/F8a"
    with pytest.raises(InconsistentComposition):
        rand_key.set_key("123456", SetKeyOp.CHECK)
    assert rand_key.key == "]EH1zyqx3Bl/F8a"
    assert rand_key.get_cnt(CharClass.ALPHABETIC) == "10"


def test_set_key_rejects_unclassified_characters():
    rand_key = RandKey("1", "0", "0")
    with pytest.raises(InvalidCharacter):
        rand_key.set_key("a b")


def test_from_text_regenerates_same_composition():
    rand_key = from_text("=tE)n5f`sidR>BV")
    assert rand_key.key == "=tE)n5f`sidR>BV"
    assert [rand_key.get_cnt(kind) for kind in CharClass] == ["10", "4", "1"]
    rand_key.generate()
    _assert_composition(rand_key.key, 10, 4, 1)


def test_from_text_rejects_non_ascii():
    with pytest.raises(InvalidCharacter):
        from_text("🦀🦀🦀")


def test_generate_key_helper():
    key = generate_key("0", "3", "0", pool="#", unit="2")
    assert key == "###"
    with pytest.raises(MissingCharacter):
        generate_key("1", "0", "0", pool="1")


def test_invalid_seed_source():
    rand_key = RandKey("1", "0", "0", config=RandKeyConfig(seed_source="dice"))
    with pytest.raises(ValueError):
        rand_key.generate()
    assert rand_key.key == ""
