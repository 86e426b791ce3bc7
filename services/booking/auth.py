# ============================================================
# auth.py — Garde d'authentification (Bearer + session)
# ------------------------------------------------------------
# Un appel est authentifié si :
#   - l'en-tête "Authorization: Bearer <token>" est présent
#   - le JWT est signé avec JWT_SECRET
#   - une session active contient exactement ce token
# Sinon → 401.
# ============================================================
import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWTError
from sqlmodel import Session

from config import JWT_ALGORITHM, JWT_SECRET
from database import get_session
from errors import UnauthorizedError
from repository import SessionRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str) -> dict:
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    s: Session = Depends(get_session),
) -> int:
    if credentials is None or not credentials.credentials:
        logger.debug("missing or malformed authorization header")
        raise UnauthorizedError()

    token = credentials.credentials
    try:
        decode_token(token)
    except PyJWTError as e:
        logger.debug(f"invalid token: {e}")
        raise UnauthorizedError()

    # Le token doit correspondre à une session encore ouverte
    session = SessionRepository(s).get_by_token(token)
    if not session:
        logger.debug("no session for token")
        raise UnauthorizedError()
    return session.user_id
