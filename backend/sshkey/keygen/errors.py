# sshkey/keygen/errors.py


class SSHKeyError(Exception):
    """Базовая ошибка генерации и кодирования SSH-ключей"""


class UnsupportedKeyTypeError(SSHKeyError):
    """Неподдерживаемый тип ключа"""

    def __init__(self, key_type: str = ""):
        self.key_type = key_type
        message = "unsupported key type"
        if key_type:
            message += f": {key_type}"
        super().__init__(message)


class MissingSSHKeysError(SSHKeyError):
    """У пары нет приватного ключа, хотя он должен был быть сгенерирован"""

    def __init__(self):
        super().__init__(
            "missing one or more keys; did something happen to them after they were generated?"
        )


class KeyTypeMismatchError(SSHKeyError):
    """Объект приватного ключа не соответствует заявленному типу"""

    def __init__(self, key_type: str, actual: str):
        self.key_type = key_type
        self.actual = actual
        super().__init__(f"private key of type {actual} does not match key type {key_type}")


class KeyGenerationError(SSHKeyError):
    """Ошибка генерации или проверки ключа"""


class FilesystemError(SSHKeyError):
    """
    Ошибка файловой системы при сохранении ключей.

    Сам генератор на диск не пишет; обертка нужна вызывающему коду,
    который сохраняет ключи.
    """

    def __init__(self, err: BaseException):
        self.err = err
        super().__init__(str(err))
        self.__cause__ = err
