import sys
from pathlib import Path

import pytest

# Make the application package importable during collection even when the
# project has not been installed.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

I18N_ENV_VARS = (
    "I18N_DIR",
    "I18N_LANGUAGE",
    "I18N_BASE_LANGUAGE",
    "I18N_MAX_NESTING_DEPTH",
    "I18N_USE_CACHE",
)


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* variables so settings fall back to their defaults."""
    for name in I18N_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
