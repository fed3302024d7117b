""" Componentes compartilhados da aplicação.

Este pacote contém:

- Exceções personalizadas
- Exception handlers do FastAPI
"""

from .exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    DatabaseException,
)
from .error_handlers import register_exception_handlers

__all__ = [
    # Exceções
    "AppException",
    "NotFoundException",
    "ValidationException",
    "DatabaseException",
    # handlers
    "register_exception_handlers",
]
