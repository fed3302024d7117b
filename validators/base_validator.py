"""
Validador base.

As regras de cada request são declaradas em um modelo pydantic
(`Field` com `max_length`/`gt`/`le` e `field_validator`). O validador
executa esse modelo sobre os dados do request e traduz cada erro do
pydantic em uma mensagem legível, na ordem dos campos.
"""

from typing import Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from core.exceptions import ValidationException

T = TypeVar('T', bound=BaseModel)


def exigir_texto(valor: Optional[str], mensagem: str) -> Optional[str]:
    """
    Rejeita texto nulo, vazio ou só com espaços.

    Usado em `field_validator(mode="before")`: o erro gerado já carrega
    a mensagem final.

    Raises:
        PydanticCustomError: se o texto estiver em branco
    """
    if valor is None or not str(valor).strip():
        raise PydanticCustomError("texto_obrigatorio", mensagem)
    return valor


class BaseValidator(Generic[T]):
    """
    Validador de requests.

    Subclasses definem `regras` (modelo pydantic com as restrições) e
    `mensagens`, que mapeia (campo, tipo de erro do pydantic) para a
    mensagem exibida. Erros sem mapeamento usam a mensagem do próprio erro.
    """

    regras: Optional[Type[BaseModel]] = None
    mensagens: Dict[Tuple[str, str], str] = {}

    def _traduzir(self, erro: dict) -> str:
        campo = str(erro["loc"][0]) if erro.get("loc") else ""
        return self.mensagens.get((campo, erro["type"]), erro["msg"])

    def validate(self, request: T) -> List[str]:
        """
        Executa as regras sobre o request.

        Returns:
            Mensagens das regras violadas, na ordem dos campos
        """
        if self.regras is None:
            return []
        try:
            self.regras.model_validate(request.model_dump())
        except ValidationError as e:
            mensagens: List[str] = []
            for erro in e.errors():
                mensagem = self._traduzir(erro)
                if mensagem not in mensagens:
                    mensagens.append(mensagem)
            return mensagens
        return []

    def validate_or_raise(self, request: T) -> None:
        """
        Raises:
            ValidationException: se alguma regra for violada
        """
        mensagens = self.validate(request)
        if mensagens:
            raise ValidationException(mensagens)
