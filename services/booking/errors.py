# ============================================================
# errors.py — Erreurs métier du service Booking
# ------------------------------------------------------------
# Sous-classes de HTTPException : levées depuis la couche service,
# FastAPI les transforme directement en réponse {"detail": ...}.
# ============================================================
from fastapi import HTTPException


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "unauthorized"):
        super().__init__(401, detail, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "not found"):
        super().__init__(404, detail)


class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "forbidden"):
        super().__init__(403, detail)
