"""Front-end core for an external OpenPGP command-line tool.

This package shells out to ``gpg`` and turns its output into typed values:
- Process runner with concurrent stdout/stderr draining
- Scoped temporary files for handing input text to the tool
- Result values for success, process failure and launch failure
- Parser for the human-readable public key listing

High-level operations (import, encrypt, decrypt, sign, list) are exposed
through GpgLauncher.
"""

from .keys import KeyInfo, KeyListingParseError, parse_key_listing
from .launcher import GpgLauncher
from .result import (
    ExceptionError,
    ProcessError,
    Result,
    Success,
    display_text,
    get_or_none,
    is_success,
    unwrap,
)

__all__ = [
    "GpgLauncher",
    "KeyInfo",
    "KeyListingParseError",
    "parse_key_listing",
    "Result",
    "Success",
    "ProcessError",
    "ExceptionError",
    "display_text",
    "get_or_none",
    "is_success",
    "unwrap",
]
