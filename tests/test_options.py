import pytest

from strictpass.errors import EmptyPool, InvalidOption, ValidationError
from strictpass.options import Options, Symbols, SymbolMode, SYMBOLS


def test_defaults():
    o = Options()
    assert o.length == 10
    assert o.numbers is False
    assert o.symbols == Symbols(SymbolMode.DISABLED)
    assert o.exclude == ""
    assert o.uppercase is True
    assert o.lowercase is True
    assert o.exclude_similar_characters is False
    assert o.strict is False


def test_symbols_variants():
    assert Options(symbols=True).symbols.mode is SymbolMode.DEFAULT
    assert Options(symbols=True).symbols.chars == SYMBOLS
    assert Options(symbols=False).symbols.enabled is False
    custom = Options(symbols="!#").symbols
    assert custom.mode is SymbolMode.CUSTOM
    assert custom.chars == "!#"
    assert Options(symbols="").symbols.mode is SymbolMode.DISABLED


def test_canonical_symbol_set():
    assert len(SYMBOLS) == len(set(SYMBOLS))
    for c in "\\`'~\"|":
        assert c in SYMBOLS
    assert not any(c.isalnum() for c in SYMBOLS)


def test_no_class_enabled():
    with pytest.raises(EmptyPool):
        Options(lowercase=False, uppercase=False, numbers=False, symbols=False)


def test_bad_values():
    for kwargs in ({"length": 0}, {"length": -1}, {"length": "10"}, {"length": True},
                   {"numbers": "yes"}, {"symbols": 3}, {"exclude": None}):
        with pytest.raises(InvalidOption):
            Options(**kwargs)


def test_errors_are_value_errors():
    try:
        Options(length=0)
        raised = False
    except ValueError as e:
        raised = isinstance(e, ValidationError) and e.code == "InvalidOption"
    assert raised


def test_from_dict_and_alias():
    o = Options.from_dict({"length": 12, "excludeSimilarCharacters": True, "symbols": "!"})
    assert o.length == 12
    assert o.exclude_similar_characters is True
    assert o.symbols.chars == "!"
    assert Options.from_dict({}) == Options()
    with pytest.raises(InvalidOption):
        Options.from_dict({"colour": "blue"})


def test_to_dict_round_trips():
    o = Options(length=8, symbols="%$", strict=True)
    d = o.to_dict()
    assert d["symbols"] == "%$"
    assert Options.from_dict(d) == o


def test_min_strict_length():
    assert Options().min_strict_length == 2
    assert Options(numbers=True, symbols=True).min_strict_length == 4
    # lowercase counts as the baseline even when disabled
    assert Options(lowercase=False, uppercase=True).min_strict_length == 2


def test_character_classes_follow_flags():
    names = [c.name for c in Options(uppercase=False, numbers=True).character_classes()]
    assert names == ["lowercase", "numbers"]
