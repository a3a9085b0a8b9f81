# sshkey/api/__init__.py
from .health import router as health_router
from .ssh_keys import router as ssh_keys_router

__all__ = ["health_router", "ssh_keys_router"]
