"""Designated thread that services every foreign call."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from skbridge.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ForeignThread:
    """Single worker thread onto which foreign calls are marshaled.

    Calls issued from the worker itself run inline, so a foreign call that
    re-enters the bridge cannot deadlock waiting on its own thread.
    """

    def __init__(self, name: str = "skbridge-foreign"):
        self.name = name
        self._executor: ThreadPoolExecutor | None = None
        self._ident: int | None = None
        self._lock = threading.Lock()

    @property
    def ident(self) -> int | None:
        return self._ident

    def _record_ident(self) -> None:
        self._ident = threading.get_ident()

    def _ensure_started(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1,
                    thread_name_prefix=self.name,
                    initializer=self._record_ident,
                )
                logger.info("Started foreign dispatch thread '%s'", self.name)
            return self._executor

    def on_thread(self) -> bool:
        return self._ident is not None and threading.get_ident() == self._ident

    def run(self, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
        """Run ``fn`` on the worker and block until it returns or raises."""

        if self.on_thread():
            return fn(*args, **kwargs)
        future = self._ensure_started().submit(fn, *args, **kwargs)
        return future.result()

    def shutdown(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
            self._ident = None
        if executor is not None:
            executor.shutdown(wait=True)
            logger.info("Stopped foreign dispatch thread '%s'", self.name)


_THREAD: ForeignThread | None = None
_THREAD_LOCK = threading.Lock()


def get_foreign_thread() -> ForeignThread:
    global _THREAD
    with _THREAD_LOCK:
        if _THREAD is None:
            _THREAD = ForeignThread(get_settings().thread_name)
        return _THREAD


def reset_foreign_thread() -> None:
    """Stop the process-wide worker; the next foreign call starts a fresh one."""

    global _THREAD
    with _THREAD_LOCK:
        thread, _THREAD = _THREAD, None
    if thread is not None:
        thread.shutdown()


def run_foreign(fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
    """Execute a foreign call on the designated thread (unless disabled in settings)."""

    if not get_settings().dedicated_thread:
        return fn(*args, **kwargs)
    return get_foreign_thread().run(fn, *args, **kwargs)


__all__ = ["ForeignThread", "get_foreign_thread", "reset_foreign_thread", "run_foreign"]
