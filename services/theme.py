import json
from typing import Any

from pydantic import BaseModel, field_validator

from core.logging_config import get_logger

logger = get_logger(__name__)

DARK_MODE = "dark"
LIGHT_MODE = "light"


class Theme(BaseModel):
    """Page-level override layer: dark/light mode plus CSS custom properties."""
    mode: str = LIGHT_MODE
    palette: dict[str, Any] = {}

    # An invalid mode and an invalid palette fall back independently
    @field_validator("mode", mode="before")
    @classmethod
    def light_mode_when_not_a_string(cls, value):
        return value if isinstance(value, str) else LIGHT_MODE

    @field_validator("palette", mode="before")
    @classmethod
    def empty_palette_when_not_an_object(cls, value):
        return value if isinstance(value, dict) else {}

    @property
    def body_class(self) -> str:
        return DARK_MODE if self.mode == DARK_MODE else ""

    def to_css(self) -> str:
        """`:root { --primary: #ff0000; }` for a non-empty palette, else an empty string."""
        if not self.palette:
            return ""
        declarations = " ".join(f"{name}: {value};" for name, value in self.palette.items())
        return f":root {{ {declarations} }}"


def parse_theme(raw: str | None) -> Theme:
    """Parse the serialized theme of a page. Never raises; falls back to the light default."""
    if not raw:
        return Theme()
    try:
        return Theme.model_validate(json.loads(raw))
    except Exception as e:
        logger.warning(f"Ignoring unparseable page theme: {e}")
        return Theme()
