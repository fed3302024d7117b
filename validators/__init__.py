"""
Validadores de requests.
Cada validador devolve a lista ordenada de mensagens das regras violadas.
"""

from .base_validator import BaseValidator
from .aviso_validators import (
    CreateAvisoRequestValidator,
    UpdateAvisoRequestValidator,
    GetAvisoRequestValidator,
    DeleteAvisoRequestValidator,
    GetAvisosRequestValidator,
)

__all__ = [
    "BaseValidator",
    "CreateAvisoRequestValidator",
    "UpdateAvisoRequestValidator",
    "GetAvisoRequestValidator",
    "DeleteAvisoRequestValidator",
    "GetAvisosRequestValidator",
]
