"""Find the App a CLI command operates on.

``wren routes`` and ``wren check`` take one target: a dotted module name
or a path to a ``.py`` file, optionally followed by ``:name``. The name
defaults to ``app``::

    wren routes myproject.web           # myproject.web.app
    wren routes myproject.web:site      # myproject.web.site
    wren check examples/site/app.py     # the app defined in that file

The target must already be an ``App``. Nothing is called to build one.
"""

import importlib
import importlib.util
from pathlib import Path
from types import ModuleType

from wren.app import App

DEFAULT_NAME = "app"


def resolve_app(target: str) -> App:
    """Return the App *target* names.

    Raises:
        ModuleNotFoundError: No such module or file.
        AttributeError: The module has no attribute of that name.
        TypeError: The attribute is not a wren ``App``.
    """
    location, _, name = target.partition(":")
    obj = getattr(_load(location), name or DEFAULT_NAME)
    if not isinstance(obj, App):
        msg = f"{target!r} resolved to {type(obj).__name__}, not a wren.App instance"
        raise TypeError(msg)
    return obj


def _load(location: str) -> ModuleType:
    if not location.endswith(".py"):
        return importlib.import_module(location)

    path = Path(location).resolve()
    if not path.is_file():
        msg = f"No such file: {location}"
        raise ModuleNotFoundError(msg)
    # Loaded under a private name and kept out of sys.modules, so a
    # ``__main__`` block in the file does not run and each load is fresh.
    spec = importlib.util.spec_from_file_location(f"_wren_target_{path.stem}", path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
