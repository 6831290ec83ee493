"""Bundled presentation templates for AIPPT."""
from pathlib import Path

# Theme JSON path
THEMES_DIR = Path(__file__).parent / "themes"


def get_theme_path(template_id: str, directory: Path = THEMES_DIR) -> Path:
    """Get the path of a template theme file, bundled unless ``directory`` is given."""
    return Path(directory) / f"{template_id}.json"
