"""Turn a ``"module:attribute"`` string into an App."""

import importlib

from sift.app import App


def resolve_app(import_string: str) -> App:
    """Import the App named by *import_string*.

    The attribute defaults to ``app``. A non-App callable is treated as
    a factory and called without arguments.

    Raises:
        ModuleNotFoundError: The module cannot be imported.
        AttributeError: The module has no such attribute.
        TypeError: The attribute (or factory result) is not an App.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or "app")

    if not isinstance(target, App) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"App factory {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc

    if isinstance(target, App):
        return target
    msg = f"{import_string!r} resolved to {type(target).__name__}, not a sift.App instance"
    raise TypeError(msg)
