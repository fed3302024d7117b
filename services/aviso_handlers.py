"""
Handlers das operações de avisos.

Um handler por operação: criar, consultar por ID, listar, editar
e remover (soft delete). Os requests chegam já validados.
"""

from typing import List
import logging

from services.base_service import BaseHandler
from repositories.aviso_repository import AvisoRepository
from database.models import AvisoORM
from models.avisos import (
    CreateAvisoRequest,
    UpdateAvisoRequest,
    GetAvisoRequest,
    GetAvisosRequest,
    DeleteAvisoRequest,
    CreateAvisoResponse,
    GetAvisoResponse,
    GetAvisosResponse,
    UpdateAvisoResponse,
    to_create_response,
    to_get_response,
    to_list_item_response,
    to_update_response,
)
from core.exceptions import NotFoundException

logger = logging.getLogger(__name__)


def _obter_aviso_ativo_or_fail(repository: AvisoRepository, aviso_id: int) -> AvisoORM:
    aviso = repository.obter_aviso_por_id(aviso_id)
    if aviso is None:
        raise NotFoundException(resource="Aviso", identifier=str(aviso_id))
    return aviso


class CreateAvisoHandler(BaseHandler[CreateAvisoRequest, CreateAvisoResponse, AvisoRepository]):
    """Cria um aviso ativo."""

    def handle(self, request: CreateAvisoRequest) -> CreateAvisoResponse:
        aviso = AvisoORM(
            titulo=request.titulo,
            mensagem=request.mensagem,
        )

        created = self.repository.add(aviso)
        self.repository.commit()

        logger.info(f"Aviso {created.id} created")

        return to_create_response(created)


class GetAvisoHandler(BaseHandler[GetAvisoRequest, GetAvisoResponse, AvisoRepository]):
    """Consulta um aviso ativo pelo ID."""

    def handle(self, request: GetAvisoRequest) -> GetAvisoResponse:
        aviso = _obter_aviso_ativo_or_fail(self.repository, request.id)
        return to_get_response(aviso)


class GetAvisosHandler(BaseHandler[GetAvisosRequest, List[GetAvisosResponse], AvisoRepository]):
    """Lista os avisos ativos, mais recentes primeiro."""

    def handle(self, request: GetAvisosRequest) -> List[GetAvisosResponse]:
        avisos = self.repository.obter_todos_avisos()
        return [to_list_item_response(aviso) for aviso in avisos]


class UpdateAvisoHandler(BaseHandler[UpdateAvisoRequest, UpdateAvisoResponse, AvisoRepository]):
    """
    Edita a mensagem de um aviso ativo.

    O título é imutável após a criação (regra de negócio).
    """

    def handle(self, request: UpdateAvisoRequest) -> UpdateAvisoResponse:
        aviso = _obter_aviso_ativo_or_fail(self.repository, request.id)

        aviso.alterar_mensagem(request.mensagem)

        updated = self.repository.update(aviso)
        self.repository.commit()

        logger.info(f"Aviso {request.id} updated")

        return to_update_response(updated)


class DeleteAvisoHandler(BaseHandler[DeleteAvisoRequest, bool, AvisoRepository]):
    """
    Remove um aviso (soft delete).

    O registro permanece no banco com ativo=False e some das consultas;
    uma segunda remoção do mesmo ID responde como não encontrado.
    """

    def handle(self, request: DeleteAvisoRequest) -> bool:
        aviso = _obter_aviso_ativo_or_fail(self.repository, request.id)

        aviso.desativar()

        self.repository.update(aviso)
        self.repository.commit()

        logger.info(f"Aviso {request.id} deleted")

        return True
