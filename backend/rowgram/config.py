# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Application Configuration
All settings are loaded from environment variables with defaults tuned
for a portrait social-media post (1080×1350). Override via backend/.env
or environment.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Canvas Defaults ─────────────────────────────────────────────────────
    default_width: int = 1080
    default_height: int = 1350
    default_template_id: str = "oxbridge-herald"

    # ─── Colour Defaults ─────────────────────────────────────────────────────
    default_primary_color: str = "#2563eb"
    default_secondary_color: str = "#1e40af"

    # ─── Roster Text Fitting ─────────────────────────────────────────────────
    # Names longer than this many characters are cut and given an ellipsis
    name_char_budget: int = 12

    # ─── Emblem ──────────────────────────────────────────────────────────────
    # Emblem square side as a fraction of the shorter canvas edge
    emblem_region_fraction: float = 0.14
    # Transport-level size policy; the engine itself only rejects
    # undecodable bytes
    emblem_max_mb: int = 5

    # ─── Preview Cache ───────────────────────────────────────────────────────
    preview_debounce_seconds: float = 0.4

    # ─── Club Presets ────────────────────────────────────────────────────────
    # JSON list of presets loaded at startup; logo paths resolve relative
    # to the file
    club_presets_path: Optional[Path] = None

    # ─── Fonts ───────────────────────────────────────────────────────────────
    # Explicit font files win over the system font search
    font_dir: Optional[Path] = None
    serif_font_path: Optional[Path] = None
    serif_bold_font_path: Optional[Path] = None
    sans_font_path: Optional[Path] = None
    sans_bold_font_path: Optional[Path] = None

    # ─── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ─── Server ──────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ─── Derived helpers ─────────────────────────────────────────────────────
    @property
    def emblem_max_bytes(self) -> int:
        return self.emblem_max_mb * 1024 * 1024

    @property
    def default_dimensions(self) -> tuple[int, int]:
        return self.default_width, self.default_height


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()
