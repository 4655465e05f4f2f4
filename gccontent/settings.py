from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Camada única de configuração.
    Pode ser sobrescrita por .env ou variáveis de ambiente prefixadas com GC_*
    """
    model_config = SettingsConfigDict(env_file=".env", env_prefix="GC_", extra="ignore")

    # ---- janela deslizante ----
    WINDOW_SIZE: int = Field(100_000, gt=0)   # bases por janela
    WINDOW_STEP: int = Field(10_000, gt=0)    # avanço por amostra

    # ---- gráfico ----
    PLOT_DIR: Path = Path("plots")
    PLOT_WIDTH: int = Field(1600, gt=0)       # pixels
    PLOT_HEIGHT: int = Field(600, gt=0)
    PLOT_DPI: int = Field(100, gt=0)

    # ---- logging ----
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None              # vazio = sem arquivo

    @model_validator(mode="after")
    def _step_within_window(self):
        if self.WINDOW_STEP > self.WINDOW_SIZE:
            raise ValueError(
                f"WINDOW_STEP ({self.WINDOW_STEP}) > WINDOW_SIZE ({self.WINDOW_SIZE})")
        return self
