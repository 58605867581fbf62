import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8100"))
    CLIENT_ORIGIN: str = os.getenv("CLIENT_ORIGIN", "*")

    # Session / token configuration
    SECRET_KEY: str = os.getenv("SECRET_KEY", "your-secret-key-here")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    SESSION_TTL_MINUTES: int = int(os.getenv("SESSION_TTL_MINUTES", "1440"))
    SESSION_CLEANUP_INTERVAL_MINUTES: int = int(os.getenv("SESSION_CLEANUP_INTERVAL_MINUTES", "15"))
    SCHEDULER_ENABLED: bool = _env_bool("SCHEDULER_ENABLED", "true")

    # Store configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    # Read only to warn that it is ignored; the store is reached through SQLAlchemy
    MONGO_URI: str = os.getenv("MONGO_URI", "")
    SQL_ECHO: bool = _env_bool("SQL_ECHO")

    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "todo_user")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "todo")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins parsed from CLIENT_ORIGIN"""
        origins = [origin.strip() for origin in self.CLIENT_ORIGIN.split(",") if origin.strip()]
        return origins or ["*"]

settings = Settings()
