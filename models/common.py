"""
Modelos comuns de resposta da API.

Todas as respostas seguem o mesmo envelope: sucesso em `Dados`,
falhas em `Mensagens`.
"""
from typing import Generic, TypeVar, List
from pydantic import BaseModel, ConfigDict, Field

#tipo genérico do conteúdo de `Dados`
T = TypeVar('T')


class RespostaSucesso(BaseModel, Generic[T]):
    """Envelope de sucesso."""
    model_config = ConfigDict(populate_by_name=True)

    dados: T = Field(..., alias="Dados", description="Conteúdo da resposta")


class RespostaErro(BaseModel):
    """Envelope de erro."""
    model_config = ConfigDict(populate_by_name=True)

    mensagens: List[str] = Field(..., alias="Mensagens", description="Mensagens de erro legíveis")


class HealthCheckResponse(BaseModel):
    """Resposta do health check."""
    status: str = Field(..., description="Estado geral (healthy/unhealthy)")
    service: str = Field(..., description="Nome do serviço")
    version: str = Field(..., description="Versão da API")
    database: str = Field(..., description="Estado do banco de dados")
    environment: str = Field(..., description="Ambiente (production/development)")


def create_success_response(dados) -> RespostaSucesso:
    """Helper para criar respostas de sucesso."""
    return RespostaSucesso(dados=dados)


def create_error_response(mensagens: List[str]) -> dict:
    """Helper para criar o corpo de respostas de erro."""
    return RespostaErro(mensagens=mensagens).model_dump(by_alias=True)
