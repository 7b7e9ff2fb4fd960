"""AES-256-GCM encryption with a key derived from a password by PBKDF2."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

__all__ = ["Sealed", "derive_key", "encrypt", "decrypt", "main"]

SALT_LEN = 16
IV_LEN = 12
KEY_LEN = 32
TAG_LEN = 16
PBKDF2_ITERS = 200_000


@dataclass(frozen=True)
class Sealed:
    """Everything needed, besides the password, to decrypt a message."""

    salt: bytes
    iv: bytes
    ciphertext: bytes
    tag: bytes


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def derive_key(password: str | bytes, salt: bytes) -> bytes:
    """Derive a 256-bit key with PBKDF2-HMAC-SHA256."""
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(), length=KEY_LEN, salt=bytes(salt), iterations=PBKDF2_ITERS
    )
    return kdf.derive(_as_bytes(password))


def encrypt(plaintext: str | bytes, password: str | bytes) -> Sealed:
    """Encrypt under a fresh random salt and IV."""
    salt = os.urandom(SALT_LEN)
    iv = os.urandom(IV_LEN)
    key = derive_key(password, salt)
    sealed = AESGCM(key).encrypt(iv, _as_bytes(plaintext), None)
    return Sealed(salt=salt, iv=iv, ciphertext=sealed[:-TAG_LEN], tag=sealed[-TAG_LEN:])


def decrypt(sealed: Sealed, password: str | bytes) -> bytes:
    """Decrypt and authenticate; raise ValueError if authentication fails."""
    key = derive_key(password, sealed.salt)
    try:
        return AESGCM(key).decrypt(sealed.iv, sealed.ciphertext + sealed.tag, None)
    except InvalidTag as exc:
        raise ValueError("decryption failed: wrong password or tampered data") from exc


def main(argv: list[str] | None = None) -> int:
    """Encrypt the given plaintext, print the parts in hex, then decrypt it again."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print('Usage: aes_gcm "plaintext" "password"')
        return 1
    plaintext, secret = args[0], args[1]
    if not plaintext:
        print("Encrypt failed", file=sys.stderr)
        return 1

    sealed = encrypt(plaintext, secret)
    print(f"SALT      : {sealed.salt.hex()}")
    print(f"IV        : {sealed.iv.hex()}")
    print(f"CIPHERTEXT: {sealed.ciphertext.hex()}")
    print(f"TAG       : {sealed.tag.hex()}")

    try:
        recovered = decrypt(sealed, secret)
    except ValueError:
        print("Decrypt failed (auth error)", file=sys.stderr)
        return 1
    print(f"DECRYPTED : {recovered.decode('utf-8', errors='replace')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())