# ============================================================
# app.py — Point d'entrée du service Booking
# ------------------------------------------------------------
# Ce module initialise l'application FastAPI du service :
#   - Configure le logging
#   - Crée les tables dans la base de données au démarrage
#   - Monte les routes API (réservation, hôtels)
# ============================================================
import logging

from fastapi import FastAPI
from sqlmodel import SQLModel

import models  # noqa: F401  (enregistre les tables dans SQLModel.metadata)
from api import router
from config import LOG_LEVEL
from database import engine

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(name)s] %(levelname)s %(message)s")

app = FastAPI(title="Booking Service")


@app.on_event("startup")
def start():
    SQLModel.metadata.create_all(engine)


@app.get("/health")
def health():
    return {"ok": True}


app.include_router(router)
