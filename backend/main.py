# main.py (в корне backend)
#!/usr/bin/env python3
"""
Точка входа для SSH Key Pair Service API
"""
import uvicorn
from sshkey.config import API_HOST, API_PORT

if __name__ == "__main__":
    uvicorn.run(
        "sshkey.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=False
    )
