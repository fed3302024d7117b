"""
Camada de serviço com a lógica de negócio.
Este pacote contém os handlers de cada operação e o mediator que
os despacha a partir do tipo de request.
"""

from .base_service import BaseHandler
from .mediator import Mediator

__all__ = [
    "BaseHandler",
    "Mediator",
]
