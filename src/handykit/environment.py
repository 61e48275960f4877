"""Runtime environment detection.

Python runs either as a regular OS process ("native") or compiled to
WebAssembly. Under Emscripten (Pyodide) the interpreter lives in a browser
page or a web worker and exposes the JavaScript global scope as the ``js``
module; under WASI there is no JavaScript host at all. Detection is
re-evaluated on every call and never cached.
"""

from __future__ import annotations

import importlib
import sys
from types import ModuleType
from typing import Literal, TypeAlias

from .errors import EnvironmentMismatchError

Environment: TypeAlias = Literal["native", "browser", "webworker", "unknown"]

WASM_PLATFORMS = frozenset({"emscripten", "wasi"})


def _js_globals() -> ModuleType | None:
    """Return Pyodide's ``js`` module, or None outside a JavaScript host."""
    if sys.platform != "emscripten":
        return None
    try:
        return importlib.import_module("js")
    except ImportError:
        return None


def is_native_environment() -> bool:
    """Return True when running as a regular operating-system process."""
    return sys.platform not in WASM_PLATFORMS


def is_browser_environment() -> bool:
    """Return True when running on a browser page (``window`` and ``document`` exist)."""
    js = _js_globals()
    return js is not None and hasattr(js, "window") and hasattr(js, "document")


def is_web_worker_environment() -> bool:
    """Return True when running inside a web worker."""
    js = _js_globals()
    return (
        js is not None
        and callable(getattr(js, "importScripts", None))
        and not hasattr(js, "window")
    )


def get_environment() -> Environment:
    """Classify the current runtime.

    Returns:
        Environment: ``"native"``, ``"browser"``, ``"webworker"`` or
        ``"unknown"`` (e.g. WASI, or Emscripten without a recognizable host).
    """
    if is_native_environment():
        return "native"
    if is_browser_environment():
        return "browser"
    if is_web_worker_environment():
        return "webworker"
    return "unknown"


def assert_native_environment() -> None:
    """Raise unless running as a regular operating-system process.

    Raises:
        EnvironmentMismatchError: If the runtime is not native.
    """
    if not is_native_environment():
        raise EnvironmentMismatchError(
            "This functionality requires a native Python environment",
            "native",
            get_environment(),
        )


def assert_browser_environment() -> None:
    """Raise unless running on a browser page.

    Raises:
        EnvironmentMismatchError: If the runtime is not a browser page.
    """
    if not is_browser_environment():
        raise EnvironmentMismatchError(
            "This functionality requires a browser environment",
            "browser",
            get_environment(),
        )
