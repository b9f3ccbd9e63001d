"""test_leveling.py — Character persistence, level table, experience-to-level.

The experience formula is kept exactly as users have always had it:

    table[desired] - (table[desired] + current_exp)  ==  -current_exp

Section 3 pins that result.  If the formula is ever corrected, those
assertions must change together with logic/leveling.py.

Run:  python test_leveling.py
"""
from __future__ import annotations
import json, sys, tempfile, traceback
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from components.character import Character
from components.exp_table import ExpTable
from core.errors import Corrupt, InvalidValue, NotFound, SmallerLevel
from core.state import load_or_default
from logic.leveling import experience_to_reach, parse_int

TABLE = ExpTable((0, 100, 300, 600, 1000, 1500, 2100, 2800, 3600, 4500, 5500))


@contextmanager
def _tmp() -> Iterator[Path]:
    with tempfile.TemporaryDirectory(prefix="ba_level_") as d:
        yield Path(d)


def _raises(exc_type, fn, *args):
    try:
        fn(*args)
    except exc_type as ex:
        return ex
    raise AssertionError(f"{exc_type.__name__} expected")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  CHARACTER PERSISTENCE
# ═══════════════════════════════════════════════════════════════════════

def test_character_defaults():
    ch = Character()
    assert ch.name is None
    assert not ch.is_selected
    assert ch.level == 1
    assert ch.skills == [1, 1, 1, 1]
    assert ch.current_exp == ""


def test_character_rejects_level_zero():
    _raises(ValueError, Character, None, 0)


def test_character_round_trip():
    with _tmp() as tmp:
        path = tmp / "characters.json"
        ch = Character(name="Hoshino", level=42, skills=[5, 3, 10, 1], current_exp="1234")
        ch.save(path)
        assert Character.load(path) == ch


def test_character_missing_fields_default():
    with _tmp() as tmp:
        path = tmp / "characters.json"
        path.write_text('{"name": "Shiroko"}', encoding="utf-8")
        assert Character.load(path) == Character(name="Shiroko")

        path.write_text('{"name": null, "level": null, "skills": null}', encoding="utf-8")
        assert Character.load(path) == Character()


def test_character_numeric_exp_is_text():
    with _tmp() as tmp:
        path = tmp / "characters.json"
        path.write_text('{"level": 3, "current_exp": 250}', encoding="utf-8")
        assert Character.load(path).current_exp == "250"


def test_character_corrupt_files():
    bad = {
        "level_zero.json": '{"level": 0}',
        "level_text.json": '{"level": "ten"}',
        "level_float.json": '{"level": 2.5}',
        "name_number.json": '{"name": 7}',
        "skills_short.json": '{"skills": [1, 1, 1]}',
        "skills_negative.json": '{"skills": [1, -1, 1, 1]}',
        "exp_list.json": '{"current_exp": [1]}',
        "deep.json": '{"skills": ' + "[" * 200000 + "]" * 200000 + "}",
    }
    with _tmp() as tmp:
        for name, text in bad.items():
            path = tmp / name
            path.write_text(text, encoding="utf-8")
            _raises(Corrupt, Character.load, path)
            assert load_or_default(Character, path) == Character(), name


def test_character_missing_file():
    with _tmp() as tmp:
        path = tmp / "characters.json"
        _raises(NotFound, Character.load, path)
        assert load_or_default(Character, path) == Character()


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  LEVEL TABLE
# ═══════════════════════════════════════════════════════════════════════

def test_table_load():
    with _tmp() as tmp:
        path = tmp / "level_table.json"
        path.write_text('{"exp_needed": [0, 15, 71, 192]}', encoding="utf-8")
        table = ExpTable.load(path)
    assert table.exp_needed == (0, 15, 71, 192)
    assert table.max_level == 4
    assert table.required_for(1) == 0
    assert table.required_for(4) == 192


def test_table_out_of_range():
    _raises(IndexError, TABLE.required_for, 12)
    _raises(IndexError, TABLE.required_for, 0)


def test_table_load_failures():
    bad = {
        "empty.json": '{"exp_needed": []}',
        "wrong_key.json": '{"exp": [0, 1]}',
        "not_ints.json": '{"exp_needed": [0, 1.5]}',
        "negative.json": '{"exp_needed": [0, -1]}',
        "broken.json": '{"exp_needed": [0,',
    }
    with _tmp() as tmp:
        _raises(NotFound, ExpTable.load, tmp / "missing.json")
        for name, text in bad.items():
            path = tmp / name
            path.write_text(text, encoding="utf-8")
            _raises(Corrupt, ExpTable.load, path)


def test_shipped_table_is_cumulative():
    table = ExpTable.load(Path(__file__).resolve().parent / "data" / "level_table.json")
    assert table.exp_needed[0] == 0
    assert all(a < b for a, b in zip(table.exp_needed, table.exp_needed[1:]))


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  EXPERIENCE TO REACH
# ═══════════════════════════════════════════════════════════════════════

def test_parse_int():
    assert parse_int("12") == 12
    assert parse_int(" 7 ") == 7
    assert parse_int(3) == 3
    _raises(InvalidValue, parse_int, "abc")
    _raises(InvalidValue, parse_int, "")
    _raises(InvalidValue, parse_int, "1.5")
    _raises(InvalidValue, parse_int, "-1")
    _raises(InvalidValue, parse_int, True)
    _raises(InvalidValue, parse_int, "0", 1)
    # int() accepts the first four; the last is past its digit limit
    _raises(InvalidValue, parse_int, "1_000")
    _raises(InvalidValue, parse_int, "+5")
    _raises(InvalidValue, parse_int, "٣")
    _raises(InvalidValue, parse_int, "１２")
    _raises(InvalidValue, parse_int, "9" * 5000)


def test_experience_formula_is_negated_current_exp():
    ch = Character(level=3, current_exp="250")
    assert experience_to_reach(ch, TABLE, "10") == -250
    assert experience_to_reach(ch, TABLE, 4) == -250


def test_experience_zero_current():
    ch = Character(level=1, current_exp="0")
    assert experience_to_reach(ch, TABLE, "2") == 0


def test_smaller_level():
    ch = Character(level=10, current_exp="0")
    ex = _raises(SmallerLevel, experience_to_reach, ch, TABLE, "10")
    assert str(ex) == "Current level is higher or equal to the desired level."
    _raises(SmallerLevel, experience_to_reach, ch, TABLE, "9")


def test_invalid_desired_level():
    ch = Character(level=1, current_exp="10")
    ex = _raises(InvalidValue, experience_to_reach, ch, TABLE, "abc")
    assert str(ex) == "Please insert a number"
    _raises(InvalidValue, experience_to_reach, ch, TABLE, "0")
    _raises(InvalidValue, experience_to_reach, ch, TABLE, "")


def test_invalid_current_exp():
    for text in ("abc", "", "-5", "1e3"):
        ch = Character(level=1, current_exp=text)
        _raises(InvalidValue, experience_to_reach, ch, TABLE, "5")


def test_desired_level_past_table():
    ch = Character(level=1, current_exp="0")
    _raises(IndexError, experience_to_reach, ch, TABLE, "99")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]
    passed = failed = 0
    for name, fn in tests:
        try:
            fn()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            traceback.print_exc()

    print(f"\n  Leveling Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
