# chainlisten/decode/__init__.py

from .amounts import decode_amount
from .notification import ClassifiedNotification, classify, parse_method


__all__ = [
    "decode_amount",
    "ClassifiedNotification",
    "classify",
    "parse_method",
]
