"""
Tests for chain-scoped address helpers.
"""
import pytest

from chainlisten.utils.address import hash_to_address, hex_string_reverse, strip_hex_prefix


@pytest.mark.parametrize("value,expected", [
    ("0102ab", "ab0201"),
    ("0x0102", "0201"),
    ("", ""),
    ("xyz", ""),
    ("abc", ""),
])
def test_hex_string_reverse(value, expected):
    assert hex_string_reverse(value) == expected


def test_strip_hex_prefix():
    assert strip_hex_prefix("0xabcd") == "abcd"
    assert strip_hex_prefix("abcd") == "abcd"
    assert strip_hex_prefix("") == ""


def test_evm_address_is_lowercase_without_prefix():
    value = "DAC17F958D2EE523A2206206994597C13D831EC7"
    assert hash_to_address(2, value) == value.lower()
    assert hash_to_address(6, "0x" + value) == value.lower()


def test_evm_address_left_unchanged_when_malformed():
    assert hash_to_address(2, "short") == "short"


def test_neo_script_hash_is_reversed():
    assert hash_to_address(4, "1122334455") == "5544332211"


def test_ont_script_hash_is_reversed():
    assert hash_to_address(3, "aabb") == "bbaa"


def test_unknown_chain_returns_value():
    assert hash_to_address(99, "abc") == "abc"
