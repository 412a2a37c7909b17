import pytest

from flowerpass.codec import (
    EncodingMode, EncodingError, encode, truncate, apply_flower_rule
)


def test_hex_mode_returns_digest_unchanged():
    digest = "750c783e6ab0b503eaa86e310a5db738"
    assert encode(digest, EncodingMode.HEX_DIGEST) == digest


def test_base64_mode_decodes_byte_pairs():
    # 48 65 6c 6c 6f 21 == b"Hello!"
    assert encode("48656c6c6f21", EncodingMode.COMPACT_BASE64) == "SGVsbG8h"


def test_base64_mode_pads_output():
    assert encode("750c783e6ab0b503eaa86e310a5db738", EncodingMode.COMPACT_BASE64) == "dQx4PmqwtQPqqG4xCl23OA=="


def test_base64_mode_rejects_odd_length_digest():
    with pytest.raises(EncodingError):
        encode("abc", EncodingMode.COMPACT_BASE64)


def test_base64_mode_rejects_non_hex_digest():
    with pytest.raises(EncodingError):
        encode("zz", EncodingMode.COMPACT_BASE64)


def test_odd_length_is_fine_in_hex_mode():
    assert encode("abc", EncodingMode.HEX_DIGEST) == "abc"


def test_mode_from_persisted_value():
    assert EncodingMode.from_value("flower") is EncodingMode.HEX_DIGEST
    assert EncodingMode.from_value("base64") is EncodingMode.COMPACT_BASE64
    assert EncodingMode.from_value(EncodingMode.HEX_DIGEST) is EncodingMode.HEX_DIGEST
    with pytest.raises(ValueError):
        EncodingMode.from_value("rot13")


def test_truncate():
    assert truncate("abcdef", 3) == "abc"
    assert truncate("abcdef", 6) == "abcdef"
    assert truncate("abc", 10) == "abc"
    assert truncate("abc", 0) == ""
    assert truncate("abc", -4) == ""


def test_flower_rule_swaps_with_first_letter():
    assert apply_flower_rule("4a9b") == "a49b"
    assert apply_flower_rule("482b") == "b824"


def test_flower_rule_keeps_code_without_letters():
    assert apply_flower_rule("4821") == "4821"


def test_flower_rule_keeps_code_starting_with_non_digit():
    for code in ["abc1", "Z123", "+/09", "=", ""]:
        assert apply_flower_rule(code) == code


def test_flower_rule_swaps_positions_not_values():
    # the first letter is swapped with position 0 only, later duplicates stay put
    assert apply_flower_rule("1a1a") == "a11a"
    assert apply_flower_rule("90+/Qx") == "Q0+/9x"


def test_flower_rule_ignores_non_ascii_digits_and_letters():
    assert apply_flower_rule("٣abc") == "٣abc"
    assert apply_flower_rule("1éb") == "bé1"
