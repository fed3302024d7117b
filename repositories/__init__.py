"""
Camada de repositório para o acesso a dados.
Os repositórios oferecem uma abstração sobre o ORM e não devem conter
regra de negócio.

"""

from .base_repository import BaseRepository
from .aviso_repository import AvisoRepository

__all__ = [
    "BaseRepository",
    "AvisoRepository",
]
