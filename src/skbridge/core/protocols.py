"""Protocols describing the estimator capability set."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ParamsCarrier(Protocol):
    """Anything whose parameters can be introspected and mutated.

    Native estimators, ``ForeignEstimator`` wrappers and raw scikit-learn
    objects all satisfy it.
    """

    def get_params(self, deep: bool = True) -> dict[str, Any]: ...

    def set_params(self, **params: Any) -> Any: ...


__all__ = ["ParamsCarrier"]
