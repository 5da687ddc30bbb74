"""High-level gpg operations.

Each operation is a fixed gpg command template. Operations that take input
text write it to a scoped temporary file and pass the file path to gpg.
Failures come back as Result error values from the process runner; no
operation adds error handling of its own beyond converting a malformed key
listing into an ExceptionError.
"""

from typing import List, Optional

import structlog

from .config import LauncherSettings
from .keys import KeyInfo, KeyListingParseError, parse_key_listing
from .result import ExceptionError, Result, Success, get_or_none
from .runner import ProcessRunner, scoped_temp_file

logger = structlog.get_logger(__name__)


class GpgLauncher:
    """Import, encrypt, decrypt, sign and list keys through gpg.

    Attributes:
        runner: Executes the gpg commands.
        temp_dir: Directory for temporary input files (None for system default).
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        settings: Optional[LauncherSettings] = None,
    ):
        settings = settings or LauncherSettings()
        self.runner = runner or ProcessRunner(
            executable=settings.gpg_path,
            timeout_seconds=settings.timeout_seconds,
        )
        self.temp_dir = settings.temp_dir

    def add_new_key(self, key: str) -> Result[str]:
        """Import an armored public key into the keyring."""
        with scoped_temp_file("publicKey", key, self.temp_dir) as path:
            return self.runner.run(["--import", str(path)])

    def decrypt(self, text: str) -> Result[str]:
        """Decrypt an armored message with a secret key from the keyring."""
        with scoped_temp_file("encrypted", text, self.temp_dir) as path:
            return self.runner.run(["-d", str(path)])

    def encrypt(self, sender: KeyInfo, recipient: KeyInfo, text: str) -> Result[str]:
        """Encrypt text for recipient, signed-as and readable by sender.

        The sender is added as a second recipient so the sent message can
        be decrypted by its author. Keys are trusted unconditionally and the
        ASCII-armored ciphertext is written to stdout.
        """
        with scoped_temp_file("decrypted", text, self.temp_dir) as path:
            return self.runner.run(
                [
                    "-e",
                    "-u", sender.name,
                    "-r", recipient.name,
                    "-r", sender.name,
                    "--trust-model", "always",
                    "--armor",
                    "--output", "-",
                    str(path),
                ]
            )

    def sign(self, text: str) -> Result[str]:
        """Clear-sign text with the default secret key."""
        with scoped_temp_file("signed", text, self.temp_dir) as path:
            return self.runner.run(["--clearsign", "-o", "-", str(path)])

    def get_keys(self) -> Result[List[KeyInfo]]:
        """List the public keys in the keyring, in gpg's order."""
        output = self.runner.run(["--list-public-keys"])
        if not isinstance(output, Success):
            return output

        try:
            return Success(parse_key_listing(output.value))
        except KeyListingParseError as exc:
            logger.error("Malformed key listing", error=str(exc))
            return ExceptionError(description=str(exc))

    def load_keys(self) -> List[KeyInfo]:
        """Public keys, or an empty list when listing fails."""
        return get_or_none(self.get_keys()) or []
