from .avisos import (
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
    to_create_response,
    to_get_response,
    to_list_item_response,
    to_update_response,
)
from .common import (
    RespostaSucesso,
    RespostaErro,
    HealthCheckResponse,
    create_success_response,
    create_error_response,
)

__all__ = [
    # Requests
    "CreateAvisoRequest", "UpdateAvisoRequestBody", "UpdateAvisoRequest",
    "GetAvisoRequest", "GetAvisosRequest", "DeleteAvisoRequest",
    # Responses
    "CreateAvisoResponse", "GetAvisoResponse", "GetAvisosResponse", "UpdateAvisoResponse",
    # Mapeamento
    "to_create_response", "to_get_response", "to_list_item_response", "to_update_response",
    # Common responses
    "RespostaSucesso", "RespostaErro", "HealthCheckResponse",
    "create_success_response", "create_error_response",
]
