# ============================================================
# database.py — Moteur SQLModel + session par requête
# ============================================================
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from config import DATABASE_URL


def make_engine(url: str):
    # SQLite en mémoire : une seule connexion partagée entre threads
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


engine = make_engine(DATABASE_URL)


# Dépendance FastAPI : fournit une Session DB par requête, auto-close
def get_session():
    with Session(engine) as s:
        yield s
