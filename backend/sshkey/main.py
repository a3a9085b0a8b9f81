# sshkey/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sshkey.config import LOG_LEVEL, ALLOWED_ORIGINS, API_VERSION
from sshkey.api import health_router, ssh_keys_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="SSH Key Pair Service", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(ssh_keys_router)

logger.info(f"SSH Key Pair Service {API_VERSION} инициализирован")
