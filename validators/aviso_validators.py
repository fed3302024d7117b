"""
Validadores dos requests de avisos.

A existência do aviso não é verificada aqui: isso é papel do handler.
"""

from pydantic import BaseModel, Field, field_validator

from models.avisos import (
    CreateAvisoRequest,
    UpdateAvisoRequest,
    GetAvisoRequest,
    DeleteAvisoRequest,
    GetAvisosRequest,
)
from validators.base_validator import BaseValidator, exigir_texto

TITULO_MAX_LENGTH = 200
MENSAGEM_MAX_LENGTH = 1000
# coluna INTEGER do banco
ID_MAX = 2147483647

MSG_TITULO_OBRIGATORIO = "O título é obrigatório."
MSG_TITULO_TAMANHO = f"O título deve ter no máximo {TITULO_MAX_LENGTH} caracteres."
MSG_MENSAGEM_OBRIGATORIA = "A mensagem é obrigatória."
MSG_MENSAGEM_TAMANHO = f"A mensagem deve ter no máximo {MENSAGEM_MAX_LENGTH} caracteres."
MSG_ID_INVALIDO = "O ID do aviso deve ser maior que zero."
MSG_ID_MAXIMO = f"O ID do aviso deve ser no máximo {ID_MAX}."


# ==================== Regras ====================

class AvisoIdRegras(BaseModel):
    id: int = Field(..., gt=0, le=ID_MAX)


class CreateAvisoRegras(BaseModel):
    titulo: str = Field(..., max_length=TITULO_MAX_LENGTH)
    mensagem: str = Field(..., max_length=MENSAGEM_MAX_LENGTH)

    @field_validator("titulo", mode="before")
    @classmethod
    def titulo_obrigatorio(cls, v):
        return exigir_texto(v, MSG_TITULO_OBRIGATORIO)

    @field_validator("mensagem", mode="before")
    @classmethod
    def mensagem_obrigatoria(cls, v):
        return exigir_texto(v, MSG_MENSAGEM_OBRIGATORIA)


class UpdateAvisoRegras(BaseModel):
    id: int = Field(..., gt=0, le=ID_MAX)
    mensagem: str = Field(..., max_length=MENSAGEM_MAX_LENGTH)

    @field_validator("mensagem", mode="before")
    @classmethod
    def mensagem_obrigatoria(cls, v):
        return exigir_texto(v, MSG_MENSAGEM_OBRIGATORIA)


_MENSAGENS_ID = {
    ("id", "greater_than"): MSG_ID_INVALIDO,
    ("id", "less_than_equal"): MSG_ID_MAXIMO,
    ("id", "missing"): MSG_ID_INVALIDO,
}

_MENSAGENS_MENSAGEM = {
    ("mensagem", "string_too_long"): MSG_MENSAGEM_TAMANHO,
    ("mensagem", "missing"): MSG_MENSAGEM_OBRIGATORIA,
}


# ==================== Validadores ====================

class CreateAvisoRequestValidator(BaseValidator[CreateAvisoRequest]):
    regras = CreateAvisoRegras
    mensagens = {
        ("titulo", "string_too_long"): MSG_TITULO_TAMANHO,
        ("titulo", "missing"): MSG_TITULO_OBRIGATORIO,
        **_MENSAGENS_MENSAGEM,
    }


class UpdateAvisoRequestValidator(BaseValidator[UpdateAvisoRequest]):
    regras = UpdateAvisoRegras
    mensagens = {**_MENSAGENS_ID, **_MENSAGENS_MENSAGEM}


class GetAvisoRequestValidator(BaseValidator[GetAvisoRequest]):
    regras = AvisoIdRegras
    mensagens = _MENSAGENS_ID


class DeleteAvisoRequestValidator(BaseValidator[DeleteAvisoRequest]):
    regras = AvisoIdRegras
    mensagens = _MENSAGENS_ID


class GetAvisosRequestValidator(BaseValidator[GetAvisosRequest]):
    """Listagem não tem entrada."""
