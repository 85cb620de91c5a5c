import pytest

from pwordgen import CHARACTER_CLASSES, SIMILAR_CHARACTERS, PasswordOptions, normalize_options
from pwordgen.pool import (
    OrderedCharSet,
    build_character_pool,
    describe_pool,
    filter_characters,
    selected_class_pools,
)

ALL_OFF = dict(lowercase=False, uppercase=False, digits=False, symbols=False)


def test_builtin_classes():
    assert len(CHARACTER_CLASSES["lowercase"]) == 26
    assert len(CHARACTER_CLASSES["uppercase"]) == 26
    assert len(CHARACTER_CLASSES["digits"]) == 10
    assert len(set(CHARACTER_CLASSES["symbols"])) == 26
    assert len(SIMILAR_CHARACTERS) == 7


def test_normalize_defaults():
    opts = normalize_options()
    assert opts == PasswordOptions()
    assert opts.length == 16
    assert opts.require_each_selected_class is False


def test_normalize_none_means_default():
    opts = normalize_options({"length": None, "custom": None, "digits": False})
    assert opts.length == 16
    assert opts.custom == ""
    assert opts.digits is False


def test_normalize_overrides_win():
    base = PasswordOptions(length=30, symbols=False)
    opts = normalize_options(base, length=12)
    assert opts.length == 12
    assert opts.symbols is False


def test_normalize_unknown_option():
    with pytest.raises(TypeError):
        normalize_options({"lenght": 12})


def test_options_are_immutable():
    with pytest.raises(AttributeError):
        normalize_options().length = 3


def test_default_pool_order():
    pool = build_character_pool(normalize_options())
    assert pool == "".join(CHARACTER_CLASSES[k] for k in ("lowercase", "uppercase", "digits", "symbols"))
    assert len(pool) == 88


def test_pool_deduplicates_in_first_seen_order():
    opts = normalize_options(ALL_OFF, digits=True, custom="9a9ba")
    assert build_character_pool(opts) == "0123456789ab"


def test_custom_with_exclusions():
    opts = normalize_options(ALL_OFF, custom="abcdef", exclude="ace")
    assert build_character_pool(opts) == "bdf"


def test_filter_characters():
    assert filter_characters("") == ""
    assert filter_characters("abc") == "abc"
    assert filter_characters("il1Lo0Oxyz", exclude_similar=True) == "xyz"
    assert filter_characters("abcdef", exclude="fa") == "bcde"
    assert filter_characters("a1b0c", exclude_similar=True, exclude="c") == "ab"


def test_class_pools_follow_declared_order():
    opts = normalize_options(custom="~~")
    pools = selected_class_pools(opts)
    assert pools == [
        CHARACTER_CLASSES["lowercase"],
        CHARACTER_CLASSES["uppercase"],
        CHARACTER_CLASSES["digits"],
        CHARACTER_CLASSES["symbols"],
        "~",
    ]


def test_class_pools_are_filtered():
    opts = normalize_options(ALL_OFF, digits=True, lowercase=True, exclude_similar=True)
    lower, digits = selected_class_pools(opts)
    assert "l" not in lower and "o" not in lower and "i" not in lower
    assert digits == "23456789"


def test_empty_classes_dropped():
    opts = normalize_options(ALL_OFF, digits=True, custom="xy", exclude="0123456789")
    assert selected_class_pools(opts) == ["xy"]


def test_custom_class_keeps_overlapping_characters():
    # "a" is already in the pool via lowercase but still forms the custom class
    opts = normalize_options(custom="a")
    assert selected_class_pools(opts)[-1] == "a"
    assert build_character_pool(opts).count("a") == 1


def test_describe_pool():
    summary = describe_pool(normalize_options(ALL_OFF, digits=True))
    assert summary.pool == "0123456789"
    assert summary.class_pools == ["0123456789"]


def test_ordered_char_set():
    s = OrderedCharSet("banana")
    s.add("c")
    s.add("a")
    assert str(s) == "banc"
    assert len(s) == 4
    assert "n" in s and "z" not in s
