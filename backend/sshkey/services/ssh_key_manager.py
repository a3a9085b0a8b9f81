# sshkey/services/ssh_key_manager.py
import logging

from sshkey.config import RSA_DEFAULT_BITS, SSH_RSA_BITS
from sshkey.keygen import IdentityProvider, SSHKeyError, generate_key_pair
from sshkey.models.ssh_key import (
    SSHKeyGenerateRequest,
    SSHKeyPairConfig,
    SSHKeyPairResponse,
    SSHKeyType,
    SSHKeyTypesResponse,
)

logger = logging.getLogger(__name__)


class SSHKeyManager:
    """Менеджер для работы с SSH-ключами"""

    @staticmethod
    def build_config(request: SSHKeyGenerateRequest) -> SSHKeyPairConfig:
        """
        Переводит запрос API в параметры генерации

        Размер не указан - RSA_DEFAULT_BITS, комментарий не указан - user@host.
        """
        return SSHKeyPairConfig(
            key_type=request.key_type,
            bits=request.bits if request.bits is not None else RSA_DEFAULT_BITS,
            comment=request.comment or "",
            passphrase=request.passphrase.encode() if request.passphrase else b"",
        )

    @staticmethod
    def generate_ssh_key_pair(
        request: SSHKeyGenerateRequest,
        identity: IdentityProvider | None = None,
    ) -> SSHKeyPairResponse:
        """
        Генерирует пару SSH-ключей

        Args:
            request: Тип ключа, размер (только для RSA), комментарий и пароль
            identity: Источник user@host для комментария по умолчанию

        Returns:
            SSHKeyPairResponse с приватным и публичным ключом и fingerprint
        """
        config = SSHKeyManager.build_config(request)
        try:
            key_pair = generate_key_pair(config, identity=identity)
        except SSHKeyError as e:
            logger.error(f"Ошибка генерации SSH-ключей: {e}")
            raise

        private_key = key_pair.private_key_pem()
        public_key = key_pair.public_key()
        if not private_key or not public_key:
            # Аксессоры уже записали причину в лог
            raise SSHKeyError(f"не удалось закодировать пару ключей типа {request.key_type.value}")

        fingerprint_sha256 = key_pair.sha256()
        return SSHKeyPairResponse(
            id=fingerprint_sha256,
            key_type=key_pair.key_type,
            bits=key_pair.bits,
            comment=key_pair.comment,
            private_key=private_key.decode("utf-8"),
            public_key=public_key.decode("utf-8"),
            fingerprint_md5=key_pair.md5(),
            fingerprint_sha256=fingerprint_sha256,
            has_passphrase=bool(config.passphrase),
        )

    @staticmethod
    def supported_types() -> SSHKeyTypesResponse:
        """Поддерживаемые типы ключей и размеры RSA"""
        return SSHKeyTypesResponse(
            key_types=list(SSHKeyType),
            rsa_bits=list(SSH_RSA_BITS),
            rsa_default_bits=RSA_DEFAULT_BITS,
        )
