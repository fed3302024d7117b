"""
Handler base.
Cada operação de negócio é um handler que recebe um request já validado
e coordena as chamadas ao repositório.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

# Type variables
Req = TypeVar('Req')  # Request
Res = TypeVar('Res')  # Response
R = TypeVar('R')  # Repository


class BaseHandler(ABC, Generic[Req, Res, R]):
    """
    Handler base que guarda o repositório injetado.
    Esta classe deve ser herdada pelos handlers de cada operação.
    """

    def __init__(self, repository: R):
        """
        Inicializa o handler.

        Args:
            repository: Instância do repositório para acesso a dados
        """
        self.repository = repository

    @abstractmethod
    def handle(self, request: Req) -> Res:
        """Executa a operação para um request já validado."""
