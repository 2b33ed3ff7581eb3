"""
Po Helper - HTTP Entry Point

A small local FastAPI application exposing the string, hashing and
passphrase-encryption helpers to the web layer.
Runs on http://127.0.0.1:18422 by default.
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import config, VERSION
from cipher import encrypt_to_base64, decrypt_from_base64, to_sha256, to_md5
from helpers import (
    Display,
    Description,
    enum_attributes,
    enum_select_list,
    constrain_length,
    strip_html,
)

__version__ = VERSION

logger = logging.getLogger(__name__)


@enum_attributes(
    SHA256=(Display("SHA-256", short_name="sha256"), Description("256-bit digest, Base64 encoded")),
    MD5=(Display("MD5", short_name="md5"), Description("128-bit digest, Base64 encoded")),
)
class HashAlgorithm(Enum):
    SHA256 = "sha256"
    MD5 = "md5"


# Create FastAPI app
app = FastAPI(
    title="Po Helper",
    description="String, hashing and passphrase encryption helpers",
    version=__version__,
)

# CORS middleware (the helpers are called from the local web UI)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,  # Must be False when allow_origins is "*"
    allow_methods=["*"],
    allow_headers=["*"],
)


async def _read_json(request: Request) -> dict:
    """Read the request body as a JSON object."""
    try:
        data = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be JSON")
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return data


def _require_str(data: dict, field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"'{field}' is required and must be a string")
    return value


# ============================================================================
# Health API
# ============================================================================

@app.get("/api/health")
async def health():
    """Liveness check."""
    return {"ok": True, "version": __version__}


# ============================================================================
# Cipher API
# ============================================================================

@app.post("/api/cipher/encrypt")
async def api_encrypt(request: Request):
    """Encrypt text with a passphrase."""
    data = await _read_json(request)
    plaintext = _require_str(data, "plaintext")
    passphrase = _require_str(data, "passphrase")

    ciphertext = encrypt_to_base64(plaintext, passphrase)
    if ciphertext is None:
        raise HTTPException(status_code=422, detail="Encryption failed")

    return {"ok": True, "ciphertext": ciphertext}


@app.post("/api/cipher/decrypt")
async def api_decrypt(request: Request):
    """Decrypt Base64 ciphertext with a passphrase."""
    data = await _read_json(request)
    ciphertext = _require_str(data, "ciphertext")
    passphrase = _require_str(data, "passphrase")

    plaintext = decrypt_from_base64(ciphertext, passphrase)
    if plaintext is None:
        # Same answer for wrong passphrase and corrupted input
        raise HTTPException(status_code=422, detail="Decryption failed")

    return {"ok": True, "plaintext": plaintext}


# ============================================================================
# Hash API
# ============================================================================

@app.get("/api/hash/algorithms")
async def hash_algorithms():
    """Select-list options for the supported digest algorithms."""
    options = enum_select_list(HashAlgorithm, selected=HashAlgorithm.SHA256)
    return {"ok": True, "options": [option.to_dict() for option in options]}


@app.post("/api/hash")
async def api_hash(request: Request):
    """Hash text with SHA-256 (optionally salted) or MD5."""
    data = await _read_json(request)
    text = _require_str(data, "text")
    salt = data.get("salt")

    try:
        algorithm = HashAlgorithm(data.get("algorithm", HashAlgorithm.SHA256.value))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown algorithm: {data.get('algorithm')}")

    if salt is not None and not isinstance(salt, str):
        raise HTTPException(status_code=400, detail="'salt' must be a string")

    if algorithm is HashAlgorithm.SHA256:
        digest = to_sha256(text, salt)
    else:
        if salt is not None:
            raise HTTPException(status_code=400, detail="'salt' is only supported for sha256")
        digest = to_md5(text)

    return {"ok": True, "algorithm": algorithm.value, "digest": digest}


# ============================================================================
# Text API
# ============================================================================

@app.post("/api/text/constrain")
async def api_constrain(request: Request):
    """Cut text to a maximum length."""
    data = await _read_json(request)
    text = _require_str(data, "text")
    max_length = data.get("max_length")
    replacement = data.get("replacement")
    include_replacement = data.get("include_replacement", True)

    if not isinstance(max_length, int) or isinstance(max_length, bool):
        raise HTTPException(status_code=400, detail="'max_length' is required and must be an integer")
    if replacement is not None and not isinstance(replacement, str):
        raise HTTPException(status_code=400, detail="'replacement' must be a string")

    result = constrain_length(text, max_length, replacement, bool(include_replacement))
    return {"ok": True, "text": result}


@app.post("/api/text/strip-html")
async def api_strip_html(request: Request):
    """Remove HTML tags and spacing from text."""
    data = await _read_json(request)
    text = _require_str(data, "text")
    return {"ok": True, "text": strip_html(text)}


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=config.python_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting Po Helper {__version__} on http://{config.HOST}:{config.PORT}")

    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=False,
        log_level=config.LOG_LEVEL,
    )
