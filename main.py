from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import logging

from config import settings, configure_logging

from routes import avisos_router
from core.error_handlers import register_exception_handlers
from database.db import create_tables, get_database_url
from models.common import HealthCheckResponse

logger = logging.getLogger(__name__)

# Configurar logging uma única vez na inicialização
configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia o ciclo de vida da aplicação."""
    # Startup
    try:
        create_tables()
    except Exception as e:
        logger.warning(f"Não foi possível criar as tabelas no banco de dados: {e}")
    yield
    # Shutdown

app = FastAPI(
    title=settings.app_name,
    description="API de cadastro de avisos com remoção lógica (soft delete).",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.get("/")
async def root():
    """Endpoint raiz com informações da API."""
    return {
        "message": f"{settings.app_name} - Cadastro de Avisos",
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }

app.include_router(avisos_router)

@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Health check com verificação do banco de dados."""
    from database.db import engine
    from sqlalchemy import text
    from sqlalchemy.exc import SQLAlchemyError

    db_status = "unknown"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Health check: erro de conexão com o banco ({get_database_url()}): {e}")
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "unhealthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "database": db_status,
        "environment": "production" if settings.is_production else "development"
    }

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
