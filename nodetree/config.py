"""Runtime settings read from the environment (and .env via python-dotenv)."""

import os
from dataclasses import dataclass, field


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    store_backend: str = "memory"
    db_path: str = "nodetree.db"
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:5173"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from NODETREE_* variables, falling back to defaults."""
        defaults = cls()
        origins = os.environ.get("NODETREE_CORS_ORIGINS")
        return cls(
            store_backend=os.environ.get("NODETREE_STORE", defaults.store_backend).lower(),
            db_path=os.environ.get("NODETREE_DB_PATH", defaults.db_path),
            log_level=os.environ.get("NODETREE_LOG_LEVEL", defaults.log_level).upper(),
            cors_origins=_split_origins(origins) if origins else defaults.cors_origins,
        )
