"""
Utilidades para datas e fusos horários.

As datas de auditoria dos avisos são gravadas sem tzinfo,
no fuso horário configurado da aplicação.
"""
from datetime import datetime
from zoneinfo import ZoneInfo
from config import settings


def get_local_timezone() -> ZoneInfo:
    """
    Obtém o fuso horário configurado.

    Returns:
        ZoneInfo: Fuso horário da aplicação.
    """
    return ZoneInfo(settings.timezone)


def get_local_now() -> datetime:
    """
    Obtém a data e hora atual no fuso horário configurado.

    Returns:
        datetime: Data e hora atual com fuso horário.
    """
    return datetime.now(get_local_timezone())


def get_naive_now() -> datetime:
    """Data e hora atual no fuso configurado, sem tzinfo (formato gravado no banco)."""
    return get_local_now().replace(tzinfo=None)
