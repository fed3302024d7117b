"""
Mediator - encaminha cada request ao seu validador e handler.

Tabela explícita tipo de request → (validador, handler). O validador roda
antes de qualquer acesso ao banco.

Uso:
    mediator = Mediator(AvisoRepository(db))
    resposta = mediator.send(GetAvisoRequest(id=1))
"""

import logging
from typing import Any, Dict, List, Tuple, Type

from repositories.aviso_repository import AvisoRepository
from services.base_service import BaseHandler
from validators.base_validator import BaseValidator

logger = logging.getLogger(__name__)


Rota = Tuple[BaseValidator, BaseHandler]


class Mediator:
    """Despacha requests de avisos."""

    def __init__(self, repository: AvisoRepository):
        self._rotas: Dict[Type, Rota] = {}
        self._register_default_handlers(repository)

    def _register_default_handlers(self, repository: AvisoRepository) -> None:
        """Registra os handlers padrão dos avisos."""
        from models.avisos import (
            CreateAvisoRequest,
            UpdateAvisoRequest,
            GetAvisoRequest,
            GetAvisosRequest,
            DeleteAvisoRequest,
        )
        from validators.aviso_validators import (
            CreateAvisoRequestValidator,
            UpdateAvisoRequestValidator,
            GetAvisoRequestValidator,
            GetAvisosRequestValidator,
            DeleteAvisoRequestValidator,
        )
        from services.aviso_handlers import (
            CreateAvisoHandler,
            UpdateAvisoHandler,
            GetAvisoHandler,
            GetAvisosHandler,
            DeleteAvisoHandler,
        )

        self.register(CreateAvisoRequest, CreateAvisoRequestValidator(), CreateAvisoHandler(repository))
        self.register(UpdateAvisoRequest, UpdateAvisoRequestValidator(), UpdateAvisoHandler(repository))
        self.register(GetAvisoRequest, GetAvisoRequestValidator(), GetAvisoHandler(repository))
        self.register(GetAvisosRequest, GetAvisosRequestValidator(), GetAvisosHandler(repository))
        self.register(DeleteAvisoRequest, DeleteAvisoRequestValidator(), DeleteAvisoHandler(repository))

    def register(self, request_type: Type, validator: BaseValidator, handler: BaseHandler) -> None:
        """
        Registra o validador e o handler de um tipo de request.

        Args:
            request_type: Classe do request
            validator: Validador executado antes do handler
            handler: Handler da operação
        """
        self._rotas[request_type] = (validator, handler)
        logger.debug(f"Handler registrado para request: {request_type.__name__}")

    def get_registered_requests(self) -> List[Type]:
        """Retorna os tipos de request registrados."""
        return list(self._rotas.keys())

    def send(self, request: Any) -> Any:
        """
        Valida e executa um request.

        Raises:
            ValidationException: se o request violar alguma regra
            NotFoundException: se o handler não encontrar o aviso
            TypeError: se o tipo de request não estiver registrado
        """
        rota = self._rotas.get(type(request))
        if rota is None:
            raise TypeError(f"Nenhum handler registrado para {type(request).__name__}")

        validator, handler = rota
        validator.validate_or_raise(request)
        return handler.handle(request)
