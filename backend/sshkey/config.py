# sshkey/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(BASE_DIR / ".env")

# Настройки API
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_VERSION = "1.0"

# Логирование
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Поддерживаемые типы ключей и размеры RSA
SSH_KEY_TYPES = ("rsa", "ed25519", "ecdsa")
SSH_RSA_BITS = (1024, 2048, 4096)
RSA_DEFAULT_BITS = 4096
RSA_PUBLIC_EXPONENT = 65537

# Контейнер openssh-key-v1
OPENSSH_KDF_ROUNDS = 16
OPENSSH_CIPHER = "aes256-ctr"
