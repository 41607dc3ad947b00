from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from stockroom.app.api.deps import get_db
from stockroom.app.db.models.models_v1 import Base, Item
from stockroom.app.db.session import make_engine
from stockroom.app.main import app


@pytest.fixture(scope="function")
def engine(tmp_path):
    """
    Base SQLite fichier isolée par test.

    Fichier (et non :memory:) pour que plusieurs connexions / threads
    voient la même base, comme en production.
    """
    eng = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def make_item(session_factory):
    """Crée un item commité et retourne son id."""

    def _make(name="Test item", stock=10, price="5.00"):
        with session_factory() as s:
            item = Item(name=name, stock=stock, price=Decimal(price))
            s.add(item)
            s.commit()
            return int(item.id)

    return _make


@pytest.fixture(scope="function")
def stock_of(session_factory):
    """Lit le stock depuis une session neuve (état réellement commité)."""

    def _stock(item_id):
        with session_factory() as s:
            return s.get(Item, item_id).stock

    return _stock


@pytest.fixture(scope="function")
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        # pas de "with" : le lifespan (engine global) n'est pas démarré
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
