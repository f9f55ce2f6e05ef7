"""
Dispatch of estimator operations onto foreign objects.

Native operation names are translated through a fixed table, the foreign
method is called on the designated foreign thread with the arguments
untouched, and the result is normalized before it is handed back.
Foreign exceptions propagate unchanged and nothing is retried.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from skbridge.config import get_settings
from skbridge.core.exceptions import UnknownOperation

from .importer import ecosystem_base
from .normalize import normalize
from .thread import run_foreign

logger = logging.getLogger(__name__)

# native name -> foreign method name
API_MAP = MappingProxyType(
    {
        "decision_function": "decision_function",
        "fit": "fit",
        "fit_transform": "fit_transform",
        "get_feature_names": "get_feature_names",
        "get_params": "get_params",
        "inverse_transform": "inverse_transform",
        "predict": "predict",
        "predict_proba": "predict_proba",
        "predict_log_proba": "predict_log_proba",
        "partial_fit": "partial_fit",
        "score_samples": "score_samples",
        "sample": "sample",
        "score": "score",
        "transform": "transform",
        "set_params": "set_params",
    }
)

API: tuple[str, ...] = tuple(API_MAP)

CLASSES_ATTR = "classes_"
COMPONENTS_ATTR = "components_"
PAIRWISE_ATTR = "_pairwise"


def translate(native_op: str) -> str:
    try:
        return API_MAP[native_op]
    except KeyError:
        raise UnknownOperation(native_op, sorted(API_MAP)) from None


def invoke(foreign_ref: Any, native_op: str, *args: Any, **kwargs: Any) -> Any:
    """Call ``native_op`` on ``foreign_ref`` and normalize the return value."""

    method_name = translate(native_op)
    logger.debug("Dispatching %s to %s.%s", native_op, type(foreign_ref).__name__, method_name)

    def _call() -> Any:
        return getattr(foreign_ref, method_name)(*args, **kwargs)

    return normalize(run_foreign(_call))


def _read(foreign_ref: Any, attr: str) -> Any:
    return normalize(run_foreign(getattr, foreign_ref, attr))


def get_classes(foreign_ref: Any) -> Any:
    return _read(foreign_ref, CLASSES_ATTR)


def get_components(foreign_ref: Any) -> Any:
    return _read(foreign_ref, COMPONENTS_ATTR)


def is_pairwise(foreign_ref: Any) -> bool:
    return bool(run_foreign(getattr, foreign_ref, PAIRWISE_ATTR, False))


def clone(foreign_ref: Any, *, safe: bool | None = None) -> Any:
    """Unfitted deep copy through the ecosystem's own ``clone``."""

    if safe is None:
        safe = get_settings().clone_safe
    base = ecosystem_base()
    return run_foreign(base.clone, foreign_ref, safe=safe)


def is_classifier(foreign_ref: Any) -> bool:
    base = ecosystem_base()
    return bool(run_foreign(base.is_classifier, foreign_ref))


__all__ = [
    "API",
    "API_MAP",
    "clone",
    "get_classes",
    "get_components",
    "invoke",
    "is_classifier",
    "is_pairwise",
    "translate",
]
