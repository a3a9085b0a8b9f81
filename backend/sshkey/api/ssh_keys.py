# sshkey/api/ssh_keys.py
from fastapi import APIRouter, HTTPException
import asyncio
import logging
from sshkey.keygen import SSHKeyError, UnsupportedKeyTypeError
from sshkey.models.ssh_key import SSHKeyGenerateRequest, SSHKeyPairResponse, SSHKeyTypesResponse
from sshkey.services import SSHKeyManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ssh-keys", tags=["ssh-keys"])

@router.get("/types", response_model=SSHKeyTypesResponse)
async def get_key_types():
    """Получить поддерживаемые типы ключей и размеры RSA"""
    return SSHKeyManager.supported_types()

@router.post("/generate", response_model=SSHKeyPairResponse)
async def generate_ssh_key(key_data: SSHKeyGenerateRequest):
    """Сгенерировать новую пару SSH-ключей"""
    loop = asyncio.get_running_loop()
    try:
        # Генерация RSA нагружает CPU, выносим из event loop
        return await loop.run_in_executor(None, SSHKeyManager.generate_ssh_key_pair, key_data)
    except UnsupportedKeyTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SSHKeyError as e:
        logger.error(f"Ошибка генерации ключа: {e}")
        raise HTTPException(status_code=500, detail=str(e))
