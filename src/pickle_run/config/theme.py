"""
Theme dataclasses and YAML loading.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ThemeColors:
    """Theme color palette."""
    background: str = "#F6B7C8"
    text: str = "#000000"
    player: str = "#000000"
    debug: str = "#3A3A4A"

    def to_rgb(self, color_name: str) -> tuple[int, int, int]:
        """Convert hex color to RGB tuple."""
        hex_color = getattr(self, color_name, self.text)
        hex_color = hex_color.lstrip("#")
        return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


@dataclass
class ThemeFonts:
    """Font family and pixel sizes."""
    family: str | None = None  # None = pygame default font
    instructions: int = 28
    title: int = 54
    label: int = 36
    code: int = 48
    debug: int = 18


@dataclass
class ThemeMessages:
    """On-screen text."""
    start_lines: list[str] = field(default_factory=lambda: [
        "Collect all the pickles",
        "Tap the screen to jump",
    ])
    win_title: str = "Pickletastic!"
    win_label: str = "CODE"
    win_code: str = "1 3 7"


@dataclass
class Theme:
    """Complete theme configuration."""
    name: str = "default"
    description: str = "Default theme"

    colors: ThemeColors = field(default_factory=ThemeColors)
    fonts: ThemeFonts = field(default_factory=ThemeFonts)
    messages: ThemeMessages = field(default_factory=ThemeMessages)
    confetti_words: list[str] = field(default_factory=lambda: [
        "sort", "of", "confetti", "pickle", "crunch", "yum",
    ])

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "Theme":
        """Create theme from YAML data."""
        theme = cls(
            name=data.get("name", "default"),
            description=data.get("description", ""),
        )

        if "colors" in data:
            theme.colors = ThemeColors(**data["colors"])

        if "fonts" in data:
            theme.fonts = ThemeFonts(**data["fonts"])

        if "messages" in data:
            theme.messages = ThemeMessages(**data["messages"])

        if data.get("confetti_words"):
            theme.confetti_words = [str(w) for w in data["confetti_words"]]

        return theme


def load_theme(theme_name: str, themes_path: Path | None = None) -> Theme:
    """
    Load a theme from YAML file.

    Args:
        theme_name: Name of the theme (without .yaml extension)
        themes_path: Path to themes directory

    Returns:
        Theme instance
    """
    if themes_path is None:
        themes_path = Path(__file__).parent / "themes"

    theme_file = themes_path / f"{theme_name}.yaml"

    if not theme_file.exists():
        logger.warning(
            f"Theme '{theme_name}' not found in {themes_path} "
            f"(available: {', '.join(list_themes(themes_path)) or 'none'}), using defaults"
        )
        return Theme(name=theme_name)

    with open(theme_file, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    logger.info(f"Loaded theme: {theme_name}")
    return Theme.from_yaml(data)


def list_themes(themes_path: Path | None = None) -> list[str]:
    """List available themes."""
    if themes_path is None:
        themes_path = Path(__file__).parent / "themes"

    return sorted(f.stem for f in themes_path.glob("*.yaml"))
