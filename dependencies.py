"""
Injeção de dependências de repositórios e do mediator.

Cada requisição recebe sua própria sessão, repositório e mediator.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import get_db
from repositories.aviso_repository import AvisoRepository
from services.mediator import Mediator


def get_aviso_repository(db: Session = Depends(get_db)) -> AvisoRepository:
    """
    Obtém uma instância de AvisoRepository.

    Args:
        db: Sessão do banco (injetada pelo FastAPI)

    Returns:
        AvisoRepository
    """
    return AvisoRepository(db)


def get_mediator(repository: AvisoRepository = Depends(get_aviso_repository)) -> Mediator:
    """Mediator com os handlers de avisos ligados ao repositório da requisição."""
    return Mediator(repository)
