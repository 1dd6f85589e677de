"""Runtime configuration read from environment variables.

Entry points call ``load_dotenv()`` first so a local ``.env`` file is honoured.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


DEFAULT_GEMINI_MODEL = "gemini/gemini-1.5-flash"


class AnalysisSettings(BaseModel):
    """Sampling parameters for the team analysis call."""

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=1000, gt=0)


class AppSettings(BaseModel):
    """Process-wide settings."""

    data_dir: str = "data"
    gemini_api_key: str = ""
    gemini_model_name: str = DEFAULT_GEMINI_MODEL
    log_level: str = "INFO"
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)

    @classmethod
    def from_env(cls) -> AppSettings:
        analysis = AnalysisSettings(
            temperature=float(os.getenv("ANALYSIS_TEMPERATURE", "0.7")),
            max_output_tokens=int(os.getenv("ANALYSIS_MAX_OUTPUT_TOKENS", "1000")),
        )
        return cls(
            data_dir=os.getenv("SKILLTEAM_DATA_DIR", "data"),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model_name=os.getenv("GEMINI_MODEL_NAME", "") or DEFAULT_GEMINI_MODEL,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            analysis=analysis,
        )
