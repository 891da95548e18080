"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler, receives path parameters positionally
Handler: TypeAlias = Callable[..., Any]

# Not-found handler, called with no arguments
NotFoundHandler: TypeAlias = Callable[[], Any]

# The continuation handed to each middleware
Next: TypeAlias = Callable[[], Any]

# A middleware wraps the rest of the chain
Middleware: TypeAlias = Callable[[Next], Any]
