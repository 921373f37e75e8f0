import sys, os, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from app.models.tax import shared_tax


@pytest.fixture(autouse=True)
def reset_tax_between_tests():
    """Every test starts (and leaves) the shared tax at its 20% default."""
    shared_tax.reset()
    yield
    shared_tax.reset()


@pytest.fixture(autouse=True)
def unified_store(monkeypatch):
    """
    Provide a single fresh in-memory store and patch _store() in common + each
    service module to return the SAME object, so services and routes agree.
    """
    from app.models.store import Store
    from app.services import common as common_mod

    store = Store()

    # Patch common._store
    monkeypatch.setattr(common_mod, "_store", lambda: store, raising=True)

    # Also patch aliases imported in service modules ("from common import _store")
    from app.services import agency_service as ags
    from app.services import vehicle_service as vs
    monkeypatch.setattr(ags, "_store", lambda: store, raising=True)
    monkeypatch.setattr(vs, "_store", lambda: store, raising=True)

    yield store
    store.clear()


@pytest.fixture
def client():
    """Flask test client from the app factory."""
    from app import create_app
    app = create_app()
    app.config.update(TESTING=True)
    with app.test_client() as c:
        yield c
