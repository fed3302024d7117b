"""
Configuração centralizada da aplicação usando pydantic-settings.

Este módulo carrega as variáveis de ambiente e configurações
da aplicação de forma tipada e validada.
"""
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Configuração da aplicação carregada de variáveis de ambiente."""

    # Database
    database_url: str = Field(
        default="sqlite:///./avisos.db",
        description="URL de conexão com o banco de dados"
    )

    # CORS Configuration
    cors_allowed_origins: str = Field(
        default="http://localhost,http://localhost:3000,http://localhost:8000",
        description="Origens permitidas para CORS, separadas por vírgula"
    )

    # Application
    app_name: str = Field(
        default="API Avisos",
        description="Nome da aplicação"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Versão da aplicação"
    )
    debug_mode: bool = Field(
        default=False,
        description="Modo debug (somente desenvolvimento)"
    )

    # Avisos
    lista_vazia_sem_conteudo: bool = Field(
        default=False,
        description="Responder 204 No Content quando não houver avisos ativos"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Timezone
    timezone: str = Field(
        default="UTC",
        description="Fuso horário usado nas datas de auditoria (formato IANA)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valida que o nível de logging seja válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(
                f"Nível de log '{v}' inválido. Usando 'INFO'. "
                f"Níveis válidos: {valid_levels}"
            )
            return "INFO"
        return v_upper

    @property
    def cors_origins_list(self) -> list[str]:
        """Retorna a lista de origens CORS permitidas."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Indica se a aplicação está em modo produção."""
        return not self.debug_mode


# Instância global de configuração
settings = Settings()


def configure_logging():
    """Configura o sistema de logging da aplicação."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=log_format,
        handlers=[
            logging.StreamHandler(),
        ]
    )

    # Reduzir verbosidade de bibliotecas externas
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger.info(f"Logging configurado no nível {settings.log_level}")
    logger.info(f"Aplicação: {settings.app_name} v{settings.app_version}")
    logger.info(f"Modo: {'Desenvolvimento' if settings.debug_mode else 'Produção'}")


def get_settings() -> Settings:
    """Retorna a instância de configuração (útil para injeção de dependência)."""
    return settings
