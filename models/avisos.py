"""
DTOs de entrada e saída dos avisos e o mapeamento entidade → resposta.

Os campos de entrada são opcionais de propósito: a obrigatoriedade é
verificada pelos validadores, que devolvem uma mensagem por regra violada.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from database.models import AvisoORM


# ==================== Requests ====================

class CreateAvisoRequest(BaseModel):
    titulo: Optional[str] = Field(None, validation_alias=AliasChoices("titulo", "Titulo"))
    mensagem: Optional[str] = Field(None, validation_alias=AliasChoices("mensagem", "Mensagem"))


class UpdateAvisoRequestBody(BaseModel):
    """Corpo do PUT: somente a mensagem pode ser editada."""
    mensagem: Optional[str] = Field(None, validation_alias=AliasChoices("mensagem", "Mensagem"))


class UpdateAvisoRequest(BaseModel):
    id: int
    mensagem: Optional[str] = None


class GetAvisoRequest(BaseModel):
    id: int


class GetAvisosRequest(BaseModel):
    pass


class DeleteAvisoRequest(BaseModel):
    id: int


# ==================== Responses ====================

class _AvisoResponseBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Id")
    titulo: str = Field(..., alias="Titulo")
    mensagem: str = Field(..., alias="Mensagem")
    data_criacao: datetime = Field(..., alias="DataCriacao")


class CreateAvisoResponse(_AvisoResponseBase):
    pass


class GetAvisoResponse(_AvisoResponseBase):
    ativo: bool = Field(..., alias="Ativo")
    data_modificacao: Optional[datetime] = Field(None, alias="DataModificacao")


class GetAvisosResponse(GetAvisoResponse):
    """Item da listagem; mesma projeção da consulta por ID."""
    pass


class UpdateAvisoResponse(_AvisoResponseBase):
    data_modificacao: datetime = Field(..., alias="DataModificacao")


# ==================== Mapeamento ====================

def to_create_response(aviso: AvisoORM) -> CreateAvisoResponse:
    return CreateAvisoResponse(
        id=aviso.id,
        titulo=aviso.titulo,
        mensagem=aviso.mensagem,
        data_criacao=aviso.data_criacao,
    )


def to_get_response(aviso: AvisoORM) -> GetAvisoResponse:
    return GetAvisoResponse(
        id=aviso.id,
        titulo=aviso.titulo,
        mensagem=aviso.mensagem,
        ativo=aviso.ativo,
        data_criacao=aviso.data_criacao,
        data_modificacao=aviso.data_modificacao,
    )


def to_list_item_response(aviso: AvisoORM) -> GetAvisosResponse:
    return GetAvisosResponse(**to_get_response(aviso).model_dump())


def to_update_response(aviso: AvisoORM) -> UpdateAvisoResponse:
    return UpdateAvisoResponse(
        id=aviso.id,
        titulo=aviso.titulo,
        mensagem=aviso.mensagem,
        data_criacao=aviso.data_criacao,
        data_modificacao=aviso.data_modificacao,
    )
