import os

# in-memory baza zanim catalog.utils.settings przeczyta env, nadpisuje env developera
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from catalog.data.database import Base, make_engine, make_session_factory
from catalog.main import create_app
from catalog.repos.product_repo import ProductRepo
from catalog.services.product_service import ProductService
import catalog.data.models  # noqa: F401


@pytest.fixture
def engine():
    """In-memory SQLite DB for fast testing."""
    _engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(_engine)
    yield _engine
    Base.metadata.drop_all(_engine)
    _engine.dispose()


@pytest.fixture
def repo(engine):
    return ProductRepo(make_session_factory(engine))


@pytest.fixture
def service(repo):
    return ProductService(repo)


@pytest.fixture
def client(service):
    """NotFoundError ma wyjsc jako 500, wiec bez re-raise w kliencie."""
    app = create_app(service=service)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
