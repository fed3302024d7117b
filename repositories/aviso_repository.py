"""
Repositório da entidade Aviso.

Todas as consultas enxergam apenas avisos ativos: um aviso desativado
(soft delete) só é acessível pelo banco diretamente.
"""

from typing import List, Optional
from sqlalchemy import select, exists
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import AvisoORM
from core.exceptions import DatabaseException
import logging

logger = logging.getLogger(__name__)


class AvisoRepository(BaseRepository[AvisoORM]):
    """Repositório da entidade Aviso."""

    def __init__(self, db: Session):
        super().__init__(db, AvisoORM)

    def obter_todos_avisos(self) -> List[AvisoORM]:
        """
        Retorna todos os avisos ativos, do mais recente para o mais antigo.

        Empates em data_criacao são desfeitos pelo id decrescente.
        """
        try:
            query = (
                select(AvisoORM)
                .where(AvisoORM.ativo.is_(True))
                .order_by(AvisoORM.data_criacao.desc(), AvisoORM.id.desc())
            )
            return list(self.db.scalars(query).all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing avisos: {e}")
            raise DatabaseException("Erro ao listar avisos")

    def obter_aviso_por_id(self, id: int) -> Optional[AvisoORM]:
        """
        Retorna um aviso ativo pelo ID.

        Args:
            id: ID do aviso

        Returns:
            O aviso, ou None se não existir ou estiver inativo
        """
        try:
            query = select(AvisoORM).where(AvisoORM.id == id, AvisoORM.ativo.is_(True))
            return self.db.scalars(query).first()
        except SQLAlchemyError as e:
            logger.error(f"Error getting aviso {id}: {e}")
            raise DatabaseException("Erro ao obter aviso")

    def existe_aviso_ativo(self, id: int) -> bool:
        """Verifica se existe um aviso ativo com o ID informado."""
        try:
            query = select(exists().where(AvisoORM.id == id, AvisoORM.ativo.is_(True)))
            return bool(self.db.scalar(query))
        except SQLAlchemyError as e:
            logger.error(f"Error checking aviso {id}: {e}")
            raise DatabaseException("Erro ao verificar aviso")
