"""
Tests for the AvisoORM lifecycle methods.
"""

from datetime import datetime, timedelta

import database.models as models_module
from database.models import AvisoORM


class TestAvisoDefaults:
    """Tests for construction defaults."""

    def test_novo_aviso_ativo(self):
        """Test a new aviso is active without modification date."""
        aviso = AvisoORM(titulo="T", mensagem="M")

        assert aviso.ativo is True
        assert aviso.data_modificacao is None
        assert isinstance(aviso.data_criacao, datetime)

    def test_data_criacao_informada(self):
        """Test an explicit data_criacao is kept."""
        data = datetime(2024, 1, 1, 8, 0, 0)

        aviso = AvisoORM(titulo="T", mensagem="M", data_criacao=data)

        assert aviso.data_criacao == data


class TestAvisoLifecycle:
    """Tests for alterar_mensagem, desativar and definir_data_modificacao."""

    def test_alterar_mensagem(self):
        """Test the message changes and the modification date is stamped."""
        aviso = AvisoORM(titulo="T", mensagem="Antiga")

        aviso.alterar_mensagem("Nova")

        assert aviso.mensagem == "Nova"
        assert aviso.titulo == "T"
        assert aviso.data_modificacao is not None
        assert aviso.data_modificacao >= aviso.data_criacao

    def test_desativar(self):
        """Test soft delete flips ativo and stamps the date."""
        aviso = AvisoORM(titulo="T", mensagem="M")

        aviso.desativar()

        assert aviso.ativo is False
        assert aviso.data_modificacao is not None

    def test_desativar_idempotente(self):
        """Test deactivating twice keeps the aviso inactive."""
        aviso = AvisoORM(titulo="T", mensagem="M")

        aviso.desativar()
        aviso.desativar()

        assert aviso.ativo is False

    def test_data_modificacao_nao_retrocede(self, monkeypatch):
        """Test the modification date never moves backwards."""
        agora = datetime(2024, 6, 1, 12, 0, 0)
        aviso = AvisoORM(titulo="T", mensagem="M", data_criacao=agora - timedelta(days=1))
        monkeypatch.setattr(models_module, "get_naive_now", lambda: agora)
        aviso.definir_data_modificacao()

        # relógio volta uma hora
        monkeypatch.setattr(models_module, "get_naive_now", lambda: agora - timedelta(hours=1))
        aviso.alterar_mensagem("Outra")

        assert aviso.data_modificacao == agora

    def test_data_modificacao_avanca(self, monkeypatch):
        """Test the modification date follows the clock forward."""
        agora = datetime(2024, 6, 1, 12, 0, 0)
        aviso = AvisoORM(titulo="T", mensagem="M")
        monkeypatch.setattr(models_module, "get_naive_now", lambda: agora)
        aviso.definir_data_modificacao()

        monkeypatch.setattr(models_module, "get_naive_now", lambda: agora + timedelta(minutes=5))
        aviso.desativar()

        assert aviso.data_modificacao == agora + timedelta(minutes=5)

    def test_repr(self):
        """Test repr shows id and state."""
        aviso = AvisoORM(id=7, titulo="T", mensagem="M")

        assert repr(aviso) == "<AvisoORM id=7 ativo=True>"
