# sshkey/keygen/keypair.py
import base64
import hashlib
import logging

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from sshkey.config import RSA_DEFAULT_BITS, RSA_PUBLIC_EXPONENT
from sshkey.models.ssh_key import SSHKeyPairConfig, SSHKeyType
from sshkey.keygen.errors import (
    KeyGenerationError,
    KeyTypeMismatchError,
    MissingSSHKeysError,
    SSHKeyError,
    UnsupportedKeyTypeError,
)
from sshkey.keygen.identity import IdentityProvider, get_ssh_key_comment
from sshkey.keygen.openssh import encode_private_key, select_encryption

logger = logging.getLogger(__name__)

# Класс приватного ключа cryptography для каждого типа
_KEY_CLASSES = {
    SSHKeyType.RSA: rsa.RSAPrivateKey,
    SSHKeyType.ED25519: ed25519.Ed25519PrivateKey,
    SSHKeyType.ECDSA: ec.EllipticCurvePrivateKey,
}


def resolve_key_type(value) -> SSHKeyType:
    """Приводит строку к SSHKeyType или бросает UnsupportedKeyTypeError"""
    try:
        return SSHKeyType(value)
    except ValueError:
        raise UnsupportedKeyTypeError(str(value or "")) from None


def fingerprint_md5(blob: bytes) -> str:
    """Устаревший MD5 fingerprint: hex через двоеточие"""
    digest = hashlib.md5(blob).hexdigest()
    return ":".join(digest[i:i + 2] for i in range(0, len(digest), 2))


def fingerprint_sha256(blob: bytes) -> str:
    """SHA256 fingerprint в формате SHA256:base64 без '='"""
    digest = hashlib.sha256(blob).digest()
    return "SHA256:" + base64.b64encode(digest).decode("ascii").rstrip("=")


def validate_rsa_key(private_key: rsa.RSAPrivateKey):
    """
    Проверка согласованности RSA-ключа: n = p*q, d*e = 1 по модулю p-1 и q-1,
    корректность CRT-параметров. Бросает ValueError при расхождении.
    """
    numbers = private_key.private_numbers()
    public = numbers.public_numbers
    p, q, d = numbers.p, numbers.q, numbers.d

    if p <= 1 or q <= 1:
        raise ValueError("invalid prime value")
    if p * q != public.n:
        raise ValueError("invalid modulus")
    for prime in (p, q):
        if (d * public.e) % (prime - 1) != 1:
            raise ValueError("invalid exponents")
    if numbers.dmp1 != d % (p - 1) or numbers.dmq1 != d % (q - 1):
        raise ValueError("invalid CRT exponents")
    if (numbers.iqmp * q) % p != 1:
        raise ValueError("invalid CRT coefficient")


def _generate_rsa_key(bits: int) -> rsa.RSAPrivateKey:
    try:
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT,
            key_size=bits,
        )
    except (ValueError, OSError) as e:
        raise KeyGenerationError(f"failed to generate key: {e}") from e

    try:
        validate_rsa_key(private_key)
    except ValueError as e:
        raise KeyGenerationError(f"failed to validate key: {e}") from e

    return private_key


def _generate_ed25519_key(bits: int) -> ed25519.Ed25519PrivateKey:
    try:
        return ed25519.Ed25519PrivateKey.generate()
    except (ValueError, OSError) as e:
        raise KeyGenerationError(f"failed to generate key: {e}") from e


def _generate_ecdsa_key(bits: int) -> ec.EllipticCurvePrivateKey:
    try:
        return ec.generate_private_key(ec.SECP384R1())
    except (ValueError, OSError) as e:
        raise KeyGenerationError(f"failed to generate key: {e}") from e


_GENERATORS = {
    SSHKeyType.RSA: _generate_rsa_key,
    SSHKeyType.ED25519: _generate_ed25519_key,
    SSHKeyType.ECDSA: _generate_ecdsa_key,
}


class SSHKeyPair:
    """
    Пара SSH-ключей.

    Хранит только приватный ключ; публичный ключ, PEM и fingerprint
    вычисляются из него при каждом обращении.
    """

    def __init__(
        self,
        key_type: SSHKeyType,
        bits: int,
        comment: str,
        passphrase: bytes,
        private_key_raw,
    ):
        self._key_type = key_type
        self._bits = bits
        self._comment = comment
        self._passphrase = passphrase
        self._private_key_raw = private_key_raw

    @property
    def key_type(self) -> SSHKeyType:
        return self._key_type

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def comment(self) -> str:
        return self._comment

    @property
    def passphrase(self) -> bytes:
        return self._passphrase

    @property
    def private_key_raw(self):
        return self._private_key_raw

    def __repr__(self) -> str:
        return f"SSHKeyPair(key_type={self._type_name()!r}, bits={self._bits})"

    def _type_name(self) -> str:
        return str(getattr(self._key_type, "value", self._key_type) or "")

    def _private_key(self):
        """Приватный ключ, проверенный на соответствие key_type"""
        if self._private_key_raw is None:
            raise MissingSSHKeysError()

        key_class = _KEY_CLASSES.get(self._key_type)
        if key_class is None:
            raise UnsupportedKeyTypeError(self._type_name())

        if not isinstance(self._private_key_raw, key_class):
            raise KeyTypeMismatchError(self._type_name(), type(self._private_key_raw).__name__)

        return self._private_key_raw

    def _public_key_line(self) -> bytes:
        """Публичный ключ в формате authorized_keys без комментария"""
        return self._private_key().public_key().public_bytes(
            encoding=serialization.Encoding.OpenSSH,
            format=serialization.PublicFormat.OpenSSH,
        )

    def _public_key_blob(self) -> tuple[str, bytes]:
        """Имя алгоритма и публичный ключ в wire-формате"""
        key_name, b64_data = self._public_key_line().split()[:2]
        return key_name.decode("ascii"), base64.b64decode(b64_data)

    def _pem_block(self) -> bytes:
        return encode_private_key(
            self._private_key(),
            self._comment,
            select_encryption(self._passphrase),
        )

    def private_key_pem(self) -> bytes:
        """Приватный ключ в PEM-формате OpenSSH (зашифрован, если задан пароль)"""
        try:
            return self._pem_block()
        except (SSHKeyError, ValueError, TypeError) as e:
            logger.error(f"Ошибка кодирования приватного ключа: {e}")
            return b""

    def public_key(self) -> bytes:
        """Публичный ключ для authorized_keys с комментарием"""
        try:
            line = self._public_key_line().strip()
        except (SSHKeyError, ValueError, TypeError) as e:
            logger.error(f"Ошибка получения публичного ключа: {e}")
            return b""

        return (line + b" " + self._comment.encode("utf-8")).strip()

    def md5(self) -> str:
        try:
            _, blob = self._public_key_blob()
        except (SSHKeyError, ValueError, TypeError) as e:
            logger.error(f"Ошибка вычисления MD5 fingerprint: {e}")
            return ""
        return fingerprint_md5(blob)

    def sha256(self) -> str:
        try:
            _, blob = self._public_key_blob()
        except (SSHKeyError, ValueError, TypeError) as e:
            logger.error(f"Ошибка вычисления SHA256 fingerprint: {e}")
            return ""
        return fingerprint_sha256(blob)


def generate_key_pair(
    config: SSHKeyPairConfig,
    identity: IdentityProvider | None = None,
) -> SSHKeyPair:
    """
    Генерирует пару SSH-ключей

    Args:
        config: Тип, размер, комментарий и пароль
        identity: Источник user@host для комментария по умолчанию

    Returns:
        SSHKeyPair

    Raises:
        UnsupportedKeyTypeError: тип ключа не поддерживается
        KeyGenerationError: ошибка генерации или проверки ключа
    """
    key_type = resolve_key_type(config.key_type)

    comment = config.comment or get_ssh_key_comment(identity)

    bits = config.bits
    if key_type == SSHKeyType.RSA and bits == 0:
        bits = RSA_DEFAULT_BITS

    private_key = _GENERATORS[key_type](bits)

    key_pair = SSHKeyPair(
        key_type=key_type,
        bits=bits,
        comment=comment,
        passphrase=config.passphrase,
        private_key_raw=private_key,
    )
    logger.info(f"Сгенерирована пара SSH-ключей типа {key_type.value}: {key_pair.sha256()}")
    return key_pair
