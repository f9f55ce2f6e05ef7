"""Functional interface accepting native estimators, wrappers and raw foreign objects."""

from __future__ import annotations

from typing import Any

from skbridge.bridge import dispatch

from .base import BaseEstimator, params_of, set_params_of
from .foreign import ForeignEstimator


def get_params(estimator: Any, deep: bool = True) -> dict[str, Any]:
    return params_of(estimator, deep=deep)


def set_params(estimator: Any, **params: Any) -> Any:
    """Mutate ``estimator`` in place and return it."""

    return set_params_of(estimator, params)


def call(estimator: Any, native_op: str, *args: Any, **kwargs: Any) -> Any:
    """Run one of the operations in ``API`` on any kind of estimator."""

    dispatch.translate(native_op)
    if isinstance(estimator, BaseEstimator):
        return getattr(estimator, native_op)(*args, **kwargs)
    return dispatch.invoke(estimator, native_op, *args, **kwargs)


def clone(estimator: Any, *, safe: bool | None = None) -> Any:
    if isinstance(estimator, ForeignEstimator):
        return estimator.clone(safe=safe)
    if isinstance(estimator, BaseEstimator):
        return estimator.clone()
    return dispatch.clone(estimator, safe=safe)


def is_classifier(estimator: Any) -> bool:
    if isinstance(estimator, BaseEstimator):
        return estimator.is_classifier()
    return dispatch.is_classifier(estimator)


def is_pairwise(estimator: Any) -> bool:
    if isinstance(estimator, BaseEstimator):
        return estimator.is_pairwise()
    return dispatch.is_pairwise(estimator)


def get_classes(estimator: Any) -> Any:
    if isinstance(estimator, BaseEstimator):
        return estimator.classes_  # type: ignore[attr-defined]
    return dispatch.get_classes(estimator)


def get_components(estimator: Any) -> Any:
    if isinstance(estimator, BaseEstimator):
        return estimator.components_  # type: ignore[attr-defined]
    return dispatch.get_components(estimator)


__all__ = [
    "call",
    "clone",
    "get_classes",
    "get_components",
    "get_params",
    "is_classifier",
    "is_pairwise",
    "set_params",
]
