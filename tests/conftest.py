import sys
from pathlib import Path

import pytest

# Ensure `import addonshift` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch) -> None:
    for name in (
        "DEBUG",
        "LOG_VERBOSITY",
        "ADDONS_ALLOWED_EXTENSIONS",
        "ADDONS_MAX_UPLOAD_SIZE",
        "STORE_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)
