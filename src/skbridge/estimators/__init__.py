"""Estimator exports."""

from .api import call, clone, get_classes, get_components, get_params, is_classifier, is_pairwise, set_params
from .base import DELIMITER, BaseEstimator, CompositeEstimator
from .foreign import ForeignEstimator, ForeignFactory, sk_import, wrap

__all__ = [
    "DELIMITER",
    "BaseEstimator",
    "CompositeEstimator",
    "ForeignEstimator",
    "ForeignFactory",
    "call",
    "clone",
    "get_classes",
    "get_components",
    "get_params",
    "is_classifier",
    "is_pairwise",
    "set_params",
    "sk_import",
    "wrap",
]
