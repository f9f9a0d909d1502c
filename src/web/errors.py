"""
Traduction des erreurs du domaine en reponses HTTP.

Le statut vient de la correspondance stable de la taxonomie (DomainError.http_status) ;
le corps contient le type, le message et le contexte structure.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from src.core.errors import DomainError


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Rend une DomainError en JSON {"kind", "cause", "data"}."""
    status = exc.http_status
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} -> {status}: {exc.message}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {status}: {exc.message}")
    return JSONResponse(status_code=status, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers d'erreurs du domaine sur l'application."""
    app.add_exception_handler(DomainError, domain_error_handler)
