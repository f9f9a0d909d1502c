"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe ORDERDESK_,
et peut optionnellement etre fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.value_objects.pagination import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

# Trouver le fichier .env a la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe ORDERDESK_.
    Exemple : ORDERDESK_DATABASE_URL=postgresql+asyncpg://user@localhost/orders
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDERDESK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de donnees (URL SQLAlchemy asynchrone)
    database_url: str = Field(default="sqlite+aiosqlite:///orderdesk.db")
    database_echo: bool = Field(default=False)

    # API
    api_title: str = Field(default="OrderDesk")
    default_page_limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/orderdesk.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return str(v).upper()
