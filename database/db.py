"""módulo de banco de dados com tratamento de erros e configuração centralizada."""
from typing import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from .models import Base, AvisoORM

from config import settings

logger = logging.getLogger(__name__)


def _connect_args(database_url: str) -> dict:
    # SQLite: a sessão pode ser usada por outra thread do pool do servidor
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


#engine / session com configuração centralizada
engine = create_engine(
    settings.database_url,
    echo=settings.debug_mode,
    future=True,
    pool_pre_ping=True,  #verifica conexões antes de usá-las
    pool_recycle=3600,   #recicla conexões a cada hora
    connect_args=_connect_args(settings.database_url),
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """dependência do FastAPI que fornece uma sessão por requisição.

    Yields:
        Session: Sessão do SQLAlchemy

    Nota:
        - Faz rollback automático em exceções do SQLAlchemy
        - Fecha a sessão de forma segura
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Erro de banco de dados na sessão: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Cria as tabelas ORM no banco de dados.

    Raises:
        SQLAlchemyError: Se houver erro ao criar as tabelas
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tabelas do banco de dados criadas/verificadas com sucesso")
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar tabelas: {e}", exc_info=True)
        raise


def get_database_url() -> str:
    """Obtém a URL do banco de dados (sem credenciais)."""
    url = engine.url.render_as_string(hide_password=True)
    if '@' in url:
        return f"***@{url.split('@', 1)[1]}"
    return url
