"""Stateless FastAPI wrapper around split / reconstruct.

Endpoints:
- GET  /health       – liveness
- POST /split        – secret -> share strings
- POST /reconstruct  – share strings -> secret

Nothing is stored between requests, and secrets and share values are
never logged.
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from shamirkit import sharing
from shamirkit.codec.charset import Charset, HexCharset
from shamirkit.config import DEFAULT_NUM_SHARES, DEFAULT_THRESHOLD, LOG_LEVEL, MAX_SHARES
from shamirkit.errors import InvalidArgument, SecretSharingError

logger = logging.getLogger(__name__)

Encoding = Literal["int", "text", "hex"]

# ------ request models (module-level for Pydantic / FastAPI compat) ------


class SplitRequest(BaseModel):
    secret: Union[int, str]
    threshold: Optional[int] = None
    num_shares: Optional[int] = None
    encoding: Optional[Encoding] = None


class ReconstructRequest(BaseModel):
    shares: List[str]
    encoding: Encoding = "int"


def _charset_for(encoding: Encoding) -> Optional[Charset]:
    if encoding == "hex":
        return HexCharset()
    if encoding == "text":
        return sharing.default_charset()
    return None


def _split(req: SplitRequest) -> dict:
    threshold = req.threshold if req.threshold is not None else DEFAULT_THRESHOLD
    num_shares = req.num_shares if req.num_shares is not None else DEFAULT_NUM_SHARES
    if num_shares > MAX_SHARES:
        raise InvalidArgument(f"At most {MAX_SHARES} shares can be issued")

    encoding = req.encoding or ("int" if isinstance(req.secret, int) else "text")
    secret = req.secret
    if encoding == "int" and isinstance(secret, str):
        if not (secret.isascii() and secret.isdecimal()):
            raise InvalidArgument("Integer secrets must be decimal digits")
        secret = int(secret)
    elif encoding != "int" and isinstance(secret, int):
        raise InvalidArgument(f"Encoding {encoding!r} needs a string secret")

    shares = sharing.split_to_strings(secret, threshold, num_shares, _charset_for(encoding))
    logger.info("Issued %d shares with threshold %d (%s)", num_shares, threshold, encoding)
    return {"shares": shares, "threshold": threshold, "num_shares": num_shares}


def _reconstruct(req: ReconstructRequest) -> dict:
    charset = _charset_for(req.encoding)
    secret = sharing.reconstruct_from_strings(req.shares, charset=charset)
    logger.info("Reconstructed a secret from %d shares (%s)", len(req.shares), req.encoding)
    return {"secret": secret}


def create_app() -> FastAPI:
    """Factory that creates the sharing service app."""
    logging.getLogger("shamirkit").setLevel(LOG_LEVEL)
    app = FastAPI(title="shamirkit")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/split")
    async def split(req: SplitRequest):
        try:
            return _split(req)
        except SecretSharingError as exc:
            raise HTTPException(422, str(exc)) from exc

    @app.post("/reconstruct")
    async def reconstruct(req: ReconstructRequest):
        try:
            return _reconstruct(req)
        except SecretSharingError as exc:
            raise HTTPException(422, str(exc)) from exc

    return app


app = create_app()
