from __future__ import annotations

from typing import Generator

from sqlalchemy.orm import Session

from stockroom.app.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    # une session (donc une transaction) par requête, jamais partagée
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
