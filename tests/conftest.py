from pathlib import Path

import pytest

from themekit.rules.loader import load_rules
from themekit.rules.models import ThemeRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def theme_rules(project_root: Path) -> ThemeRules:
    """The theme rules shipped at the project root."""
    rules_path = project_root / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)
