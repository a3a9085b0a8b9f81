from .ssh_key import (
    SSHKeyType,
    SSHKeyPairConfig,
    SSHKeyGenerateRequest,
    SSHKeyPairResponse,
    SSHKeyTypesResponse,
)

__all__ = [
    "SSHKeyType",
    "SSHKeyPairConfig",
    "SSHKeyGenerateRequest",
    "SSHKeyPairResponse",
    "SSHKeyTypesResponse",
]
