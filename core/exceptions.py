"""
Exceções personalizadas da aplicação.

Estas exceções oferecem uma forma estruturada de tratar erros de negócio
e mapeá-los para os códigos HTTP apropriados na camada de API.
"""

from typing import Optional, Any


class AppException(Exception):
    """Exceção base para todos os erros da aplicação."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def mensagens(self) -> list[str]:
        """Mensagens expostas no envelope de erro."""
        return [self.message]


class ValidationException(AppException):
    """Exceção para violações de regras de validação, uma mensagem por regra."""

    def __init__(
        self,
        mensagens: list[str],
        details: Optional[dict[str, Any]] = None,
    ):
        self._mensagens = list(mensagens)
        message = "; ".join(self._mensagens) or "Dados inválidos"
        super().__init__(message=message, status_code=400, details=details)

    @property
    def mensagens(self) -> list[str]:
        return list(self._mensagens)


class NotFoundException(AppException):
    """Exceção quando um recurso não é encontrado."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} não encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class DatabaseException(AppException):
    """Exceção para erros de banco de dados."""

    def __init__(
        self,
        message: str = "Erro de banco de dados",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)
