"""Public key records parsed from the gpg key listing.

A listing entry is four raw lines (pub, fingerprint, uid, sub). The
identity fields shown to users are a pure function of the uid line; the
record itself is immutable.
"""

import re
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Matched against the whole uid line, e.g.
#   uid           [ultimate] Jane Doe <jane@example.com>
UID_PATTERN = re.compile(r"uid *\[(.*)\] (.*?)(\s<(.*)>)?")


def parse_uid(uid: str) -> Dict[str, str]:
    """Extract trust level, name and email from a raw uid line.

    Returns empty strings for every field when the line does not match.
    """
    match = UID_PATTERN.fullmatch(uid)
    if match is None:
        return {"name": "", "trust_level": "", "email": ""}
    return {
        "name": (match.group(2) or "").strip(),
        "trust_level": (match.group(1) or "").strip(),
        "email": (match.group(4) or "").strip(),
    }


class KeyInfo(BaseModel):
    """One public key entry from the gpg listing.

    The raw lines are kept verbatim (trimmed). name, trust_level and email
    are computed from uid on every access, so they always agree with it,
    including on copies made with model_copy(update=...). Values passed for
    them are ignored.

    Attributes:
        pub_info: Algorithm, size, creation date and capabilities line.
        pub_hash: Fingerprint line.
        uid: Identity line, "uid [<trust>] <name> <<email>>".
        sub: Subkey line.
        name: Identity name, empty when uid does not parse.
        trust_level: Bracketed trust value (e.g. "ultimate", "unknown").
        email: Address inside angle brackets, empty when absent.
    """

    model_config = ConfigDict(frozen=True)

    pub_info: str = Field(..., description="Raw pub line")
    pub_hash: str = Field(..., description="Raw fingerprint line")
    uid: str = Field(..., description="Raw uid line")
    sub: str = Field(..., description="Raw sub line")

    @computed_field
    @property
    def name(self) -> str:
        """Name derived from uid."""
        return parse_uid(self.uid)["name"]

    @computed_field
    @property
    def trust_level(self) -> str:
        """Trust level derived from uid."""
        return parse_uid(self.uid)["trust_level"]

    @computed_field
    @property
    def email(self) -> str:
        """Email derived from uid."""
        return parse_uid(self.uid)["email"]

    @property
    def is_valid(self) -> bool:
        """True when a name could be extracted from uid."""
        return bool(self.name.strip())

    def __str__(self) -> str:
        return f"{self.pub_info}\n      {self.pub_hash}\n{self.uid}\n{self.sub}"
