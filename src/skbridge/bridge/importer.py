"""Import surface for the foreign (scikit-learn) ecosystem."""

from __future__ import annotations

import importlib
import logging
from types import MappingProxyType, ModuleType
from typing import Any

from skbridge.config import get_settings
from skbridge.core.exceptions import MissingBackend

logger = logging.getLogger(__name__)

# Foreign modules that have a native counterpart, mapped to its name.
PORTED_MODULES = MappingProxyType(
    {
        "cross_validation": "CrossValidation",
        "pipeline": "Pipelines",
        "grid_search": "GridSearch",
    }
)


def import_module(name: str) -> ModuleType:
    """Like ``importlib.import_module`` but raises an actionable ``MissingBackend``."""

    try:
        return importlib.import_module(name)
    except ImportError as exc:
        logger.debug("Import of foreign module '%s' failed: %s", name, exc)
        raise MissingBackend(name, url=get_settings().install_url) from exc


def ecosystem() -> ModuleType:
    return import_module(get_settings().ecosystem)


def ecosystem_base() -> ModuleType:
    return import_module(get_settings().base_module)


def resolve(module: str, name: str) -> Any:
    """Return the foreign symbol ``name`` defined in ``<ecosystem>.<module>``."""

    settings = get_settings()
    root = settings.ecosystem
    if module == root or module.startswith(f"{root}."):
        raise ValueError(f"Bad import of '{module}': please remove `{root}.` (it is implicit)")
    if module in PORTED_MODULES:
        logger.warning(
            "Module %s has been ported natively (%s); prefer it over the foreign module",
            module,
            PORTED_MODULES[module],
        )

    ecosystem()  # report a missing library before a missing submodule
    full_name = f"{root}.{module}"
    foreign_module = import_module(full_name)
    try:
        symbol = getattr(foreign_module, name)
    except AttributeError as exc:
        raise MissingBackend(f"{full_name}.{name}", url=settings.install_url) from exc
    logger.debug("Resolved foreign symbol %s.%s", full_name, name)
    return symbol


__all__ = ["PORTED_MODULES", "ecosystem", "ecosystem_base", "import_module", "resolve"]
