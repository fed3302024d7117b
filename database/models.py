from sqlalchemy import Column, String, Integer, DateTime, Boolean, Index
from sqlalchemy.orm import declarative_base

from utils.datetime_utils import get_naive_now

Base = declarative_base()


#ORM: Avisos
class AvisoORM(Base):
    __tablename__ = "avisos"
    __table_args__ = (Index("ix_avisos_ativo_data_criacao", "ativo", "data_criacao"),)
    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(200), nullable=False)
    mensagem = Column(String(1000), nullable=False)
    ativo = Column(Boolean, default=True, nullable=False)
    #auditoria
    data_criacao = Column(DateTime, default=get_naive_now, nullable=False)
    data_modificacao = Column(DateTime, nullable=True)

    def __init__(self, **kwargs):
        # defaults visíveis antes do flush
        kwargs.setdefault("ativo", True)
        kwargs.setdefault("data_criacao", get_naive_now())
        super().__init__(**kwargs)

    def definir_data_modificacao(self) -> None:
        """Marca o aviso como modificado agora.

        A data de modificação nunca retrocede, mesmo se o relógio voltar.
        """
        agora = get_naive_now()
        if self.data_modificacao is not None and agora < self.data_modificacao:
            agora = self.data_modificacao
        self.data_modificacao = agora

    def alterar_mensagem(self, mensagem: str) -> None:
        """Única alteração permitida após a criação: o título é imutável."""
        self.mensagem = mensagem
        self.definir_data_modificacao()

    def desativar(self) -> None:
        """Soft delete: o aviso deixa de ser visível e não pode ser reativado."""
        self.ativo = False
        self.definir_data_modificacao()

    def __repr__(self) -> str:
        return f"<AvisoORM id={self.id} ativo={self.ativo}>"


__all__ = [
    "Base",
    "AvisoORM",
]
