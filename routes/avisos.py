"""
Rotas de avisos (Controller).

Este módulo traduz as requisições HTTP em requests e os envia ao Mediator.
Toda a regra de negócio fica nos handlers; as exceções são convertidas em
respostas pelos exception handlers registrados no app.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging

from models.avisos import (
    CreateAvisoRequest,
    UpdateAvisoRequestBody,
    UpdateAvisoRequest,
    GetAvisoRequest,
    GetAvisosRequest,
    DeleteAvisoRequest,
    CreateAvisoResponse,
    GetAvisoResponse,
    GetAvisosResponse,
    UpdateAvisoResponse,
)
from models.common import RespostaSucesso, RespostaErro, create_success_response
from services.mediator import Mediator
from dependencies import get_mediator
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/avisos", tags=["avisos"])

_ERRO_VALIDACAO = {status.HTTP_400_BAD_REQUEST: {"model": RespostaErro, "description": "Dados inválidos"}}
_ERRO_NAO_ENCONTRADO = {status.HTTP_404_NOT_FOUND: {"model": RespostaErro, "description": "Aviso não encontrado"}}


@router.get(
    "/{id}",
    response_model=RespostaSucesso[GetAvisoResponse],
    responses={**_ERRO_VALIDACAO, **_ERRO_NAO_ENCONTRADO},
)
async def obter_aviso(id: int, mediator: Mediator = Depends(get_mediator)):
    """Retorna um aviso ativo pelo ID."""
    return create_success_response(mediator.send(GetAvisoRequest(id=id)))


@router.get(
    "",
    response_model=RespostaSucesso[List[GetAvisosResponse]],
    responses={status.HTTP_204_NO_CONTENT: {"description": "Sem avisos (quando habilitado)"}},
)
async def obter_avisos(mediator: Mediator = Depends(get_mediator)):
    """Retorna todos os avisos ativos, do mais recente para o mais antigo."""
    avisos = mediator.send(GetAvisosRequest())
    if not avisos and settings.lista_vazia_sem_conteudo:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return create_success_response(avisos)


@router.post(
    "",
    response_model=RespostaSucesso[CreateAvisoResponse],
    status_code=status.HTTP_200_OK,
    responses=_ERRO_VALIDACAO,
)
async def criar_aviso(request: CreateAvisoRequest, mediator: Mediator = Depends(get_mediator)):
    """Cria um novo aviso."""
    return create_success_response(mediator.send(request))


@router.put(
    "/{id}",
    response_model=RespostaSucesso[UpdateAvisoResponse],
    responses={**_ERRO_VALIDACAO, **_ERRO_NAO_ENCONTRADO},
)
async def editar_aviso(
    id: int,
    body: UpdateAvisoRequestBody,
    mediator: Mediator = Depends(get_mediator),
):
    """Edita um aviso existente (apenas a mensagem pode ser editada)."""
    request = UpdateAvisoRequest(id=id, mensagem=body.mensagem)
    return create_success_response(mediator.send(request))


@router.delete(
    "/{id}",
    response_model=RespostaSucesso[bool],
    responses={**_ERRO_VALIDACAO, **_ERRO_NAO_ENCONTRADO},
)
async def remover_aviso(id: int, mediator: Mediator = Depends(get_mediator)):
    """Remove um aviso (soft delete: marca como inativo)."""
    return create_success_response(mediator.send(DeleteAvisoRequest(id=id)))
