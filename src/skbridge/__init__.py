"""Uniform estimator protocol over native and scikit-learn backed estimators."""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - best effort metadata lookup
    __version__ = version("skbridge")
except PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

from .bridge import API, API_MAP, normalize
from .config import BridgeSettings, configure, get_settings
from .core import CyclicParameterGraph, InvalidParameter, MissingBackend, SkbridgeError, UnknownOperation
from .estimators import (
    BaseEstimator,
    CompositeEstimator,
    ForeignEstimator,
    ForeignFactory,
    call,
    clone,
    get_classes,
    get_components,
    get_params,
    is_classifier,
    is_pairwise,
    set_params,
    sk_import,
    wrap,
)

__all__ = [
    "__version__",
    "API",
    "API_MAP",
    "BaseEstimator",
    "BridgeSettings",
    "CompositeEstimator",
    "CyclicParameterGraph",
    "ForeignEstimator",
    "ForeignFactory",
    "InvalidParameter",
    "MissingBackend",
    "SkbridgeError",
    "UnknownOperation",
    "call",
    "clone",
    "configure",
    "get_classes",
    "get_components",
    "get_params",
    "get_settings",
    "is_classifier",
    "is_pairwise",
    "normalize",
    "set_params",
    "sk_import",
    "wrap",
]
