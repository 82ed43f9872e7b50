from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Drivent'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    BCRYPT_ROUNDS: int = 12

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'drivent'

    # Full URL override (e.g. sqlite+aiosqlite:///./drivent.db for local runs and tests)
    DATABASE_URL: Optional[str] = None

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD.get_secret_value()}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # ViaCEP postal code lookup
    VIA_CEP_BASE_URL: str = 'https://viacep.com.br/ws'
    VIA_CEP_TIMEOUT: float = 5.0


settings = Settings()  # type: ignore
