import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from skbridge.bridge.thread import reset_foreign_thread  # noqa: E402
from skbridge.config import BridgeSettings, configure  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Every test starts from default settings and a fresh foreign thread."""

    for name in list(os.environ):
        if name.upper().startswith("SKBRIDGE_"):
            monkeypatch.delenv(name, raising=False)
    configure(BridgeSettings())
    yield
    reset_foreign_thread()
    configure(BridgeSettings())


@pytest.fixture()
def inline_dispatch():
    """Run foreign calls on the calling thread."""

    return configure(BridgeSettings(dedicated_thread=False))
