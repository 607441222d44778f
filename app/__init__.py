from importlib import import_module
from typing import Any


def create_app(*args: Any, **kwargs: Any):
    """Build the wedding guest API lazily so importing ``app`` stays cheap."""
    module = import_module("app.main")
    return module.create_app(*args, **kwargs)


__all__ = ["create_app"]
