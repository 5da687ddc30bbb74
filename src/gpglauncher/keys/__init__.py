"""Key records and the key listing parser."""

from .models import KeyInfo, parse_uid
from .parser import LISTING_SEPARATOR, KeyListingParseError, parse_key_listing

__all__ = [
    "KeyInfo",
    "parse_uid",
    "LISTING_SEPARATOR",
    "KeyListingParseError",
    "parse_key_listing",
]
