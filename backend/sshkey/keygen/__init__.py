# sshkey/keygen/__init__.py
from .errors import (
    SSHKeyError,
    UnsupportedKeyTypeError,
    MissingSSHKeysError,
    KeyTypeMismatchError,
    KeyGenerationError,
    FilesystemError,
)
from .identity import IdentityProvider, get_ssh_key_comment
from .keypair import (
    SSHKeyPair,
    generate_key_pair,
    resolve_key_type,
    fingerprint_md5,
    fingerprint_sha256,
)

__all__ = [
    "SSHKeyError",
    "UnsupportedKeyTypeError",
    "MissingSSHKeysError",
    "KeyTypeMismatchError",
    "KeyGenerationError",
    "FilesystemError",
    "IdentityProvider",
    "get_ssh_key_comment",
    "SSHKeyPair",
    "generate_key_pair",
    "resolve_key_type",
    "fingerprint_md5",
    "fingerprint_sha256",
]
