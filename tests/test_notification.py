"""
Tests for notification classification.
"""
from chainlisten.decode.notification import classify, normalize_contract, parse_method
from chainlisten.types import NeoNotification, NeoStackItem
from tests.helpers import PROXY_CONTRACT, byte_array, integer, method_hex, notification


def test_parse_method_decodes_hex_text():
    assert parse_method(method_hex("CrossChainLockEvent")) == "CrossChainLockEvent"
    assert parse_method("0x" + method_hex("Lock")) == "Lock"


def test_parse_method_tolerates_garbage():
    assert parse_method("zz") == ""
    assert parse_method(None) == ""
    assert parse_method(12) == ""


def test_classify_exposes_method_and_fields():
    classified = classify(notification(PROXY_CONTRACT, "Lock", byte_array("aa"), integer(5)))

    assert classified.method == "Lock"
    assert classified.contract == PROXY_CONTRACT
    assert classified.has_fields(3)
    assert not classified.has_fields(4)
    assert classified.text(1) == "aa"
    assert classified.item(2).type == "Integer"


def test_classify_skips_empty_notifications():
    empty = NeoNotification(contract="0x" + PROXY_CONTRACT, state=NeoStackItem(type="Array", value=[]))
    assert classify(empty) is None


def test_classify_skips_non_array_state():
    scalar = NeoNotification(contract="0x" + PROXY_CONTRACT, state=NeoStackItem(type="ByteArray", value="aa"))
    assert classify(scalar) is None


def test_text_of_non_string_value_is_empty():
    nested = NeoStackItem(type="Array", value=[byte_array("aa")])
    classified = classify(notification(PROXY_CONTRACT, "Lock", nested))
    assert classified.text(1) == ""


def test_normalize_contract():
    assert normalize_contract("0xEDD2862D") == "edd2862d"
    assert normalize_contract("") == ""
