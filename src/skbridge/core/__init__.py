"""Core abstractions: error taxonomy and estimator protocols."""

from .exceptions import CyclicParameterGraph, InvalidParameter, MissingBackend, SkbridgeError, UnknownOperation
from .protocols import ParamsCarrier

__all__ = [
    "SkbridgeError",
    "MissingBackend",
    "InvalidParameter",
    "CyclicParameterGraph",
    "UnknownOperation",
    "ParamsCarrier",
]
