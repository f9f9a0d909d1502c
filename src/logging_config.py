"""
Configuration du logging de l'application via loguru.

Fournit un logging structure avec :
- Sortie console : lisible, coloree, avec le contexte (IDs de commande, produit...)
- Sortie fichier : serialisee en JSON, avec rotation, pour l'analyse historique

Les services journalisent via `from loguru import logger` en passant le
contexte en arguments nommes, ex: logger.info("Commande creee", order_id=...).
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Bibliotheques dont les logs DEBUG noient les evenements metier
_NOISY_LOGGERS = ("aiosqlite", "sqlalchemy.engine", "httpx")


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/orderdesk.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    file_logging: bool = True,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
        file_logging : Desactive le handler fichier si False (tests, CLI ponctuelle)
    """
    logger.remove()

    # Handler console - le contexte (extra) est affiche apres le message
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level> {extra}"
        ),
        colorize=True,
    )

    if file_logging:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,
        )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging configure", log_file=str(log_file), level=log_level)
