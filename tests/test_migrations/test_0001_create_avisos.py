"""
Tests for the alembic migration that creates the avisos table.
"""

import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

from database.models import AvisoORM


MIGRATION_PATH = Path(__file__).resolve().parents[2] / "alembic" / "versions" / "0001_create_avisos.py"


@pytest.fixture
def migration():
    spec = importlib.util.spec_from_file_location("migration_0001_create_avisos", MIGRATION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def engine():
    engine = create_engine("sqlite:///:memory:")
    yield engine
    engine.dispose()


def _executar(engine, funcao):
    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            funcao()


class TestCreateAvisosMigration:

    def test_revisao_inicial(self, migration):
        assert migration.revision == "0001"
        assert migration.down_revision is None

    def test_upgrade_cria_tabela_igual_ao_orm(self, migration, engine):
        """Test the migrated table matches the ORM columns and index."""
        _executar(engine, migration.upgrade)

        inspector = inspect(engine)
        assert "avisos" in inspector.get_table_names()

        colunas = {c["name"]: c for c in inspector.get_columns("avisos")}
        assert set(colunas) == set(AvisoORM.__table__.columns.keys())
        assert colunas["titulo"]["nullable"] is False
        assert colunas["data_modificacao"]["nullable"] is True

        indices = [i["name"] for i in inspector.get_indexes("avisos")]
        assert "ix_avisos_ativo_data_criacao" in indices

    def test_downgrade_remove_tabela(self, migration, engine):
        _executar(engine, migration.upgrade)
        _executar(engine, migration.downgrade)

        assert "avisos" not in inspect(engine).get_table_names()
