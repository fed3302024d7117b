"""
Repositório base com as operações comuns de persistência.

Envolve a sessão do SQLAlchemy e converte falhas do banco
em DatabaseException. Não contém regra de negócio.
"""

from typing import TypeVar, Generic, Optional, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositório genérico com operações de leitura e escrita por chave primária.

    Esta classe deve ser herdada pelos repositórios de cada entidade.
    """

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa o repositório.

        Args:
            db: Sessão SQLAlchemy
            model_class: Classe do modelo ORM deste repositório
        """
        self.db = db
        self.model_class = model_class

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtém uma entidade pela chave primária, sem filtro de visibilidade.

        Args:
            id: ID da entidade

        Returns:
            A entidade ou None se não existir
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Erro ao obter {self.model_class.__name__}")

    def add(self, entity: T) -> T:
        """
        Persiste uma nova entidade e carrega os valores gerados pelo banco.

        Args:
            entity: A entidade a criar

        Returns:
            A entidade criada
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Erro ao criar {self.model_class.__name__}")

    def update(self, entity: T) -> T:
        """
        Envia as alterações de uma entidade existente.

        Args:
            entity: A entidade a atualizar

        Returns:
            A entidade atualizada
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error updating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Erro ao atualizar {self.model_class.__name__}")

    def commit(self) -> None:
        """Confirma a transação atual."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Erro ao salvar alterações no banco de dados")

    def rollback(self) -> None:
        """Desfaz a transação atual."""
        self.db.rollback()

    def refresh(self, entity: T) -> T:
        """
        Recarrega uma entidade a partir do banco.

        Args:
            entity: A entidade a recarregar

        Returns:
            A entidade recarregada
        """
        self.db.refresh(entity)
        return entity
