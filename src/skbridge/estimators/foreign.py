"""Estimators whose capabilities are serviced by a foreign (scikit-learn) object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from skbridge.bridge import dispatch, importer
from skbridge.bridge.thread import run_foreign

from .base import BaseEstimator


class ForeignEstimator(BaseEstimator):
    """Wrapper owning exactly one foreign estimator object.

    Every operation goes through the dispatch table; return values come
    back normalized. ``fit``, ``partial_fit`` and ``set_params`` return the
    wrapper so calls can be chained.
    """

    def __init__(self, foreign: Any):
        if isinstance(foreign, BaseEstimator):
            raise TypeError(f"{type(foreign).__name__} is a native estimator and cannot be wrapped")
        self.foreign = foreign

    def _invoke(self, native_op: str, *args: Any, **kwargs: Any) -> Any:
        return dispatch.invoke(self.foreign, native_op, *args, **kwargs)

    # parameters

    def get_params(self, deep: bool = True) -> dict[str, Any]:
        return self._invoke("get_params", deep=deep)

    def set_params(self, **params: Any) -> ForeignEstimator:
        if not params:
            return self
        self._invoke("set_params", **params)
        return self

    # training

    def fit(self, *args: Any, **kwargs: Any) -> ForeignEstimator:
        self._invoke("fit", *args, **kwargs)
        return self

    def partial_fit(self, *args: Any, **kwargs: Any) -> ForeignEstimator:
        self._invoke("partial_fit", *args, **kwargs)
        return self

    def fit_transform(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("fit_transform", *args, **kwargs)

    # inference

    def predict(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("predict", *args, **kwargs)

    def predict_proba(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("predict_proba", *args, **kwargs)

    def predict_log_proba(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("predict_log_proba", *args, **kwargs)

    def decision_function(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("decision_function", *args, **kwargs)

    def transform(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("transform", *args, **kwargs)

    def inverse_transform(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("inverse_transform", *args, **kwargs)

    def score(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("score", *args, **kwargs)

    def score_samples(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("score_samples", *args, **kwargs)

    def sample(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("sample", *args, **kwargs)

    def get_feature_names(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke("get_feature_names", *args, **kwargs)

    # learned state and traits

    @property
    def classes_(self) -> Any:
        return dispatch.get_classes(self.foreign)

    @property
    def components_(self) -> Any:
        return dispatch.get_components(self.foreign)

    def is_pairwise(self) -> bool:
        return dispatch.is_pairwise(self.foreign)

    def is_classifier(self) -> bool:
        return dispatch.is_classifier(self.foreign)

    def clone(self, *, safe: bool | None = None) -> ForeignEstimator:
        return ForeignEstimator(dispatch.clone(self.foreign, safe=safe))

    def __sklearn_clone__(self) -> ForeignEstimator:
        # get_params describes the wrapped object, not this constructor
        return self.clone()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.foreign!r})"


@dataclass(frozen=True)
class ForeignFactory:
    """Constructor for one foreign estimator class, resolved eagerly."""

    module: str
    name: str
    constructor: Any

    def __call__(self, *args: Any, **params: Any) -> ForeignEstimator:
        return ForeignEstimator(run_foreign(self.constructor, *args, **params))

    @property
    def qualname(self) -> str:
        return f"{self.module}.{self.name}"


def sk_import(module: str, *names: str) -> ForeignFactory | tuple[ForeignFactory, ...]:
    """Resolve foreign estimator classes to factories.

    Example::

        LinearRegression = sk_import("linear_model", "LinearRegression")
        model = LinearRegression().fit(x, y)
    """

    if not names:
        raise ValueError(f"sk_import('{module}') needs at least one name to import")
    factories = tuple(ForeignFactory(module, name, importer.resolve(module, name)) for name in names)
    return factories[0] if len(factories) == 1 else factories


def wrap(foreign: Any) -> ForeignEstimator:
    """Adopt an existing foreign object, or return an existing wrapper unchanged."""

    if isinstance(foreign, ForeignEstimator):
        return foreign
    return ForeignEstimator(foreign)


__all__ = ["ForeignEstimator", "ForeignFactory", "sk_import", "wrap"]
