"""
Exception handlers do FastAPI.

Convertem as exceções da aplicação e os erros de parsing do FastAPI
no envelope `{"Mensagens": [...]}`.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import AppException
from models.common import create_error_response

logger = logging.getLogger(__name__)


MENSAGEM_ID_INVALIDO = "O ID do aviso deve ser um número inteiro."
MENSAGEM_JSON_INVALIDO = "O corpo da requisição não é um JSON válido."
MENSAGEM_CORPO_OBRIGATORIO = "O corpo da requisição é obrigatório."
MENSAGEM_ERRO_INTERNO = "Erro interno do servidor"


def _mensagem_para_erro(erro: dict) -> str:
    """Traduz um erro do pydantic em mensagem legível."""
    loc = tuple(erro.get("loc", ()))
    tipo = erro.get("type", "")

    if tipo == "json_invalid":
        return MENSAGEM_JSON_INVALIDO
    if loc[:1] == ("path",) and loc[-1:] == ("id",):
        return MENSAGEM_ID_INVALIDO
    if loc == ("body",) and tipo == "missing":
        return MENSAGEM_CORPO_OBRIGATORIO

    campo = ""
    if loc:
        campo = ".".join(str(parte) for parte in loc[1:]) or str(loc[0])
    if campo:
        return f"{campo}: {erro.get('msg', 'valor inválido')}"
    return erro.get("msg", "valor inválido")


def mensagens_de_validacao(exc: RequestValidationError) -> list[str]:
    """Lista ordenada de mensagens, sem repetições."""
    mensagens: list[str] = []
    for erro in exc.errors():
        mensagem = _mensagem_para_erro(erro)
        if mensagem not in mensagens:
            mensagens.append(mensagem)
    return mensagens


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler para as exceções da aplicação."""
    if exc.status_code >= 500:
        logger.error(
            f"{exc.__class__.__name__} em {request.method} {request.url.path}: {exc.message}",
            extra={"details": exc.details},
        )
        mensagens = [MENSAGEM_ERRO_INTERNO]
    else:
        logger.info(f"{exc.__class__.__name__} em {request.method} {request.url.path}: {exc.message}")
        mensagens = exc.mensagens

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(mensagens),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erros de parsing (JSON malformado, id não inteiro) respondem 400, não 422."""
    mensagens = mensagens_de_validacao(exc)
    logger.info(f"Requisição inválida em {request.method} {request.url.path}: {mensagens}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=create_error_response(mensagens),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler para exceções não tratadas."""
    logger.exception(f"Erro não tratado em {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=create_error_response([MENSAGEM_ERRO_INTERNO]),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Registra os exception handlers no app FastAPI.

    Usage:
        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
