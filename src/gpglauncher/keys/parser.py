"""Parser for `gpg --list-public-keys` output.

The listing starts with a header (the keyring path) closed by a line of
dashes, followed by one block per key:

    pub   rsa3072 2021-05-01 [SC]
          0123456789ABCDEF0123456789ABCDEF01234567
    uid           [ultimate] Jane Doe <jane@example.com>
    sub   rsa3072 2021-05-01 [E]

Blank lines are ignored, so blocks are consumed in fixed groups of four
non-blank lines.
"""

from typing import List

import structlog

from .models import KeyInfo

logger = structlog.get_logger(__name__)

LISTING_SEPARATOR = "--------------------------------"
LINES_PER_KEY = 4


class KeyListingParseError(ValueError):
    """Raised when the lines after the separator do not form whole key blocks."""

    def __init__(self, line_count: int):
        self.line_count = line_count
        self.leftover = line_count % LINES_PER_KEY
        super().__init__(
            f"Key listing has {line_count} entry lines, which leaves "
            f"{self.leftover} line(s) outside a {LINES_PER_KEY}-line key block"
        )


def _entry_lines(text: str) -> List[str]:
    """Non-blank lines after the first separator line, in order."""
    lines = [line for line in text.splitlines() if line.strip()]
    for index, line in enumerate(lines):
        if line == LISTING_SEPARATOR:
            return lines[index + 1:]
    return []


def parse_key_listing(text: str) -> List[KeyInfo]:
    """Convert listing text into KeyInfo records, preserving order.

    Args:
        text: Standard output of `gpg --list-public-keys`.

    Returns:
        One KeyInfo per four-line block. Empty when the separator line
        never appears.

    Raises:
        KeyListingParseError: If the entry lines are not a multiple of four.
    """
    entries = _entry_lines(text)
    if len(entries) % LINES_PER_KEY:
        raise KeyListingParseError(len(entries))

    keys: List[KeyInfo] = []
    for start in range(0, len(entries), LINES_PER_KEY):
        pub_info, pub_hash, uid, sub = (
            line.strip() for line in entries[start:start + LINES_PER_KEY]
        )
        keys.append(KeyInfo(pub_info=pub_info, pub_hash=pub_hash, uid=uid, sub=sub))

    logger.debug("Parsed key listing", key_count=len(keys))
    return keys
