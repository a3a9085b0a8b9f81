# sshkey/services/__init__.py
from .ssh_key_manager import SSHKeyManager

__all__ = ["SSHKeyManager"]
