"""Kida environment setup.

Creates a kida Environment from wren's AppConfig. The environment is
created once during ``App.freeze()`` and shared by every render.
"""

from kida import Environment, FileSystemLoader

from wren.config import AppConfig


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment rooted at ``config.template_dir``.

    Views, layouts, and components live in subdirectories of the same
    root, so one loader serves all three.
    """
    return Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
