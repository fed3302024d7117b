"""
Configuração de fixtures para pytest.

Este módulo contém fixtures reutilizáveis para todos os testes.
"""

import pytest
import os
from typing import Generator, Dict, Any, List
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar banco em memória nos testes
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db
from database.models import Base, AvisoORM


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==================== Aviso Fixtures ====================

@pytest.fixture
def aviso_data() -> Dict[str, Any]:
    """Sample aviso payload for testing."""
    return {
        "titulo": "Manutenção programada",
        "mensagem": "O sistema ficará indisponível no sábado das 8h às 12h."
    }


@pytest.fixture
def aviso_instance(db_session: Session, aviso_data: Dict[str, Any]) -> AvisoORM:
    """Create an active aviso in the database."""
    aviso = AvisoORM(
        titulo=aviso_data["titulo"],
        mensagem=aviso_data["mensagem"],
    )
    db_session.add(aviso)
    db_session.commit()
    db_session.refresh(aviso)
    return aviso


@pytest.fixture
def aviso_inativo(db_session: Session) -> AvisoORM:
    """Create a soft-deleted aviso in the database."""
    aviso = AvisoORM(
        titulo="Aviso antigo",
        mensagem="Este aviso já foi removido.",
    )
    aviso.desativar()
    db_session.add(aviso)
    db_session.commit()
    db_session.refresh(aviso)
    return aviso


@pytest.fixture
def avisos_em_datas_distintas(db_session: Session) -> List[AvisoORM]:
    """Create three active avisos whose ids do not follow creation order."""
    base = datetime(2024, 1, 10, 9, 0, 0)
    avisos = [
        AvisoORM(titulo="Meio", mensagem="Segundo aviso", data_criacao=base),
        AvisoORM(titulo="Mais antigo", mensagem="Primeiro aviso", data_criacao=base - timedelta(days=3)),
        AvisoORM(titulo="Mais recente", mensagem="Terceiro aviso", data_criacao=base + timedelta(days=2)),
    ]
    db_session.add_all(avisos)
    db_session.commit()
    for aviso in avisos:
        db_session.refresh(aviso)
    return avisos


# ==================== Utility Functions ====================

def assert_datetime_format(dt_string: str) -> bool:
    """Assert that a string is a valid datetime in ISO format."""
    try:
        datetime.fromisoformat(dt_string.replace('Z', '+00:00'))
        return True
    except (ValueError, AttributeError):
        return False
