"""
Configuración centralizada del motor de descuentos
"""
from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # Batch input/output
    INPUT_PATH: str = "data/TRX1000.csv"
    OUTPUT_PATH: str = "data/processed_orders.csv"

    # What to do with a malformed record: stop the batch or skip and report it
    ERROR_POLICY: Literal["abort", "skip"] = "abort"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
