# sshkey/keygen/identity.py
import getpass
import logging
import socket

logger = logging.getLogger(__name__)


class IdentityProvider:
    """Источник имени текущего пользователя и хоста"""

    def username(self) -> str:
        return getpass.getuser()

    def hostname(self) -> str:
        return socket.gethostname()


def get_ssh_key_comment(identity: IdentityProvider | None = None) -> str:
    """
    Комментарий по умолчанию вида "user@host\\n"

    Args:
        identity: Источник имени пользователя и хоста

    Returns:
        Комментарий или пустая строка, если пользователя или хост узнать не удалось
    """
    identity = identity or IdentityProvider()
    try:
        username = identity.username()
    except Exception as e:
        logger.warning(f"Не удалось определить пользователя: {e}")
        return ""

    try:
        hostname = identity.hostname()
    except Exception as e:
        logger.warning(f"Не удалось определить имя хоста: {e}")
        return ""

    if not username or not hostname:
        return ""

    return f"{username}@{hostname}\n"
