# sshkey/models/ssh_key.py
from pydantic import BaseModel, Field, field_validator
from enum import Enum

from sshkey.config import SSH_RSA_BITS


class SSHKeyType(str, Enum):
    RSA = "rsa"
    ED25519 = "ed25519"
    ECDSA = "ecdsa"


class SSHKeyPairConfig(BaseModel):
    """Параметры генерации пары ключей.

    key_type допускает произвольную строку: неизвестный тип отклоняет фабрика
    (UnsupportedKeyTypeError), а не валидация модели.
    """
    key_type: SSHKeyType | str
    bits: int = Field(default=0, ge=0)  # Только для RSA, 0 - по умолчанию
    comment: str = ""
    passphrase: bytes = b""


class SSHKeyGenerateRequest(BaseModel):
    """Модель запроса на генерацию SSH-ключа"""
    key_type: SSHKeyType
    bits: int | None = None
    comment: str | None = None
    passphrase: str | None = None

    @field_validator("bits")
    @classmethod
    def check_bits(cls, value: int | None) -> int | None:
        if value is not None and value not in SSH_RSA_BITS:
            allowed = ", ".join(str(b) for b in SSH_RSA_BITS)
            raise ValueError(f"Недопустимый размер ключа {value}, допустимо: {allowed}")
        return value


class SSHKeyPairResponse(BaseModel):
    """Модель ответа API со сгенерированной парой"""
    id: str
    key_type: SSHKeyType
    bits: int
    comment: str
    private_key: str
    public_key: str
    fingerprint_md5: str
    fingerprint_sha256: str
    has_passphrase: bool = False


class SSHKeyTypesResponse(BaseModel):
    """Поддерживаемые типы ключей и размеры RSA"""
    key_types: list[SSHKeyType]
    rsa_bits: list[int]
    rsa_default_bits: int
