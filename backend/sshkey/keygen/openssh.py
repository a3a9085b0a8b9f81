# sshkey/keygen/openssh.py
"""
Кодирование приватного ключа в контейнер OpenSSH (openssh-key-v1).

Ключ генерирует cryptography, контейнер с комментарием и шифрованием
по паролю (aes256-ctr, bcrypt KDF) собирает asyncssh.
"""
import asyncssh
from cryptography.hazmat.primitives import serialization

from sshkey.config import OPENSSH_CIPHER, OPENSSH_KDF_ROUNDS


class NoEncryption:
    """Контейнер без шифрования"""

    def export(self, key: asyncssh.SSHKey) -> bytes:
        return key.export_private_key("openssh")


class PassphraseEncryption:
    """Шифрование контейнера паролем, как в ssh-keygen"""

    def __init__(self, passphrase: bytes, cipher_name: str = OPENSSH_CIPHER, rounds: int = OPENSSH_KDF_ROUNDS):
        if not passphrase:
            raise ValueError("пароль не может быть пустым")
        self.passphrase = passphrase
        self.cipher_name = cipher_name
        self.rounds = rounds

    def export(self, key: asyncssh.SSHKey) -> bytes:
        return key.export_private_key(
            "openssh",
            self.passphrase,
            cipher_name=self.cipher_name,
            rounds=self.rounds,
            ignore_few_rounds=True,
        )


def select_encryption(passphrase: bytes | None):
    """Шифрование по паролю или без него"""
    if passphrase:
        return PassphraseEncryption(passphrase)
    return NoEncryption()


def to_ssh_key(private_key, comment: str) -> asyncssh.SSHKey:
    """Переносит ключ cryptography в asyncssh и задает комментарий"""
    data = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.OpenSSH,
        encryption_algorithm=serialization.NoEncryption(),
    )
    key = asyncssh.import_private_key(data)
    key.set_comment(comment or None)
    return key


def encode_private_key(private_key, comment: str, encryption=None) -> bytes:
    """
    Приватный ключ в PEM-формате OpenSSH

    Args:
        private_key: Ключ cryptography (RSA, Ed25519 или ECDSA)
        comment: Комментарий, сохраняется внутри контейнера
        encryption: NoEncryption или PassphraseEncryption

    Returns:
        PEM-блок "OPENSSH PRIVATE KEY"
    """
    encryption = encryption or NoEncryption()
    return encryption.export(to_ssh_key(private_key, comment))
