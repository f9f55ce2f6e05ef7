"""Native estimators and the composite parameter engine."""

from __future__ import annotations

import copy
import inspect
import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from skbridge.bridge import dispatch
from skbridge.core.exceptions import CyclicParameterGraph, InvalidParameter
from skbridge.core.protocols import ParamsCarrier

logger = logging.getLogger(__name__)

DELIMITER = "__"


class _Traversal(threading.local):
    """Estimators (and the parameter names leading to them) on the current descent path."""

    def __init__(self) -> None:
        self.estimators: list[Any] = []
        self.names: list[str] = []


_TRAVERSAL = _Traversal()


@contextmanager
def _entering(estimator: Any) -> Iterator[None]:
    if any(active is estimator for active in _TRAVERSAL.estimators):
        raise CyclicParameterGraph(_TRAVERSAL.names)
    _TRAVERSAL.estimators.append(estimator)
    try:
        yield
    finally:
        _TRAVERSAL.estimators.pop()


@contextmanager
def _descending(name: str) -> Iterator[None]:
    _TRAVERSAL.names.append(name)
    try:
        yield
    finally:
        _TRAVERSAL.names.pop()


def is_estimator(value: Any) -> bool:
    """True for anything exposing ``get_params`` (native, wrapped or raw foreign)."""

    return not isinstance(value, type) and isinstance(value, ParamsCarrier)


def params_of(estimator: Any, deep: bool = True) -> dict[str, Any]:
    if isinstance(estimator, BaseEstimator):
        return estimator.get_params(deep=deep)
    return dispatch.invoke(estimator, "get_params", deep=deep)


def set_params_of(estimator: Any, params: Mapping[str, Any]) -> Any:
    if isinstance(estimator, BaseEstimator):
        return estimator.set_params(**params)
    if params:
        dispatch.invoke(estimator, "set_params", **params)
    return estimator


class BaseEstimator:
    """Native estimator.

    Declared parameters are the named arguments of ``__init__``; each one
    must be stored on an attribute of the same name.
    """

    @classmethod
    def _get_param_names(cls) -> list[str]:
        init = cls.__init__
        if init is object.__init__:
            return []
        names = []
        for parameter in inspect.signature(init).parameters.values():
            if parameter.name == "self" or parameter.kind == parameter.VAR_KEYWORD:
                continue
            if parameter.kind == parameter.VAR_POSITIONAL:
                raise TypeError(f"{cls.__name__} should not take *args in __init__ (got {parameter})")
            names.append(parameter.name)
        return sorted(names)

    def get_params(self, deep: bool = True) -> dict[str, Any]:
        params = {name: getattr(self, name) for name in self._get_param_names()}
        if not deep:
            return params

        with _entering(self):
            for name, value in list(params.items()):
                if not is_estimator(value):
                    continue
                with _descending(name):
                    nested = params_of(value, deep=True)
                params.update({f"{name}{DELIMITER}{key}": sub for key, sub in nested.items()})
        return params

    def set_params(self, **params: Any) -> BaseEstimator:
        """Set own parameters and, through ``name__rest`` keys, those of sub-estimators.

        Every key is validated before anything is changed. Own parameters are
        assigned first, so a nested key reaches the sub-estimator bound after
        this call even when the same call replaces it.
        """

        if not params:
            return self

        valid_params = self.get_params(deep=True)
        for key in params:
            self._validate_path(key, params, valid_params)

        nested = []
        for key, value in params.items():
            name, delimiter, rest = key.partition(DELIMITER)
            if delimiter:
                nested.append((name, rest, value))
            else:
                self._set_local(key, value)

        for name, rest, value in nested:
            logger.debug("Forwarding %s=%r to sub-estimator '%s' of %s", rest, value, name, type(self).__name__)
            set_params_of(getattr(self, name), {rest: value})
        return self

    def _validate_path(self, key: str, params: Mapping[str, Any], valid_params: Mapping[str, Any]) -> None:
        name, delimiter, rest = key.partition(DELIMITER)
        if not delimiter:
            if key not in self._get_param_names():
                raise InvalidParameter(key, self)
            return
        if name not in valid_params:
            raise InvalidParameter(name, self)

        owner = params[name] if name in params else valid_params[name]
        while True:
            segment, delimiter, rest = rest.partition(DELIMITER)
            owner_params = params_of(owner, deep=True) if is_estimator(owner) else {}
            if segment not in owner_params:
                raise InvalidParameter(segment, owner)
            if not delimiter:
                return
            owner = owner_params[segment]

    def _set_local(self, name: str, value: Any) -> None:
        setattr(self, name, value)

    def fit_transform(self, x: Any, y: Any = None, **kwargs: Any) -> Any:
        return self.fit(x, y, **kwargs).transform(x)  # type: ignore[attr-defined]

    def clone(self) -> BaseEstimator:
        """Unfitted copy built from the declared parameters only."""

        with _entering(self):
            params = {}
            for name, value in self.get_params(deep=False).items():
                with _descending(name):
                    params[name] = _clone_value(value)
        return type(self)(**params)

    def is_pairwise(self) -> bool:
        return bool(getattr(self, "_pairwise", False))

    def is_classifier(self) -> bool:
        return getattr(self, "_estimator_type", None) == "classifier"

    def __repr__(self) -> str:
        if any(active is self for active in _TRAVERSAL.estimators):
            return f"{self.__class__.__name__}(...)"
        with _entering(self):
            shown = ", ".join(f"{name}={value!r}" for name, value in self.get_params(deep=False).items())
        return f"{self.__class__.__name__}({shown})"


def _clone_value(value: Any) -> Any:
    if isinstance(value, BaseEstimator):
        return value.clone()
    if is_estimator(value):
        return dispatch.clone(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return type(value)(_clone_value(item) for item in value)
    return copy.deepcopy(value)


class CompositeEstimator(BaseEstimator):
    """Estimator whose parameters may themselves be estimators.

    Nested parameters are addressed as ``name__subname``; only the first
    delimiter matters at each level and the remainder is handed verbatim to
    the sub-estimator's own ``set_params``.
    """


__all__ = ["BaseEstimator", "CompositeEstimator", "DELIMITER", "is_estimator", "params_of", "set_params_of"]
