from .avisos import router as avisos_router

__all__ = [
    "avisos_router",
]
