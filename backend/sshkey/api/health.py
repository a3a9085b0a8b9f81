# sshkey/api/health.py
from fastapi import APIRouter
from datetime import datetime, timezone
from sshkey.config import API_VERSION, SSH_KEY_TYPES

router = APIRouter(prefix="/api", tags=["health"])

@router.get("/health")
async def health_check():
    """Проверка состояния API"""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "key_types": list(SSH_KEY_TYPES),
        "version": API_VERSION,
    }
