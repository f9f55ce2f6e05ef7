"""Bridge to the foreign estimator ecosystem."""

from .dispatch import API, API_MAP, invoke, translate
from .importer import PORTED_MODULES, import_module, resolve
from .normalize import normalize
from .thread import ForeignThread, get_foreign_thread, reset_foreign_thread, run_foreign

__all__ = [
    "API",
    "API_MAP",
    "PORTED_MODULES",
    "ForeignThread",
    "get_foreign_thread",
    "import_module",
    "invoke",
    "normalize",
    "reset_foreign_thread",
    "resolve",
    "run_foreign",
    "translate",
]
