"""Route pattern matching.

A pattern is a path with ``{name}`` placeholders::

    "/user/{id}"            matches "/user/42"           -> ("42",)
    "/post/{year}/{slug}"   matches "/post/2024/hello"   -> ("2024", "hello")

Placeholders match one or more of ``[A-Za-z0-9_]``. Everything else is
literal and matched exactly. The whole path must match.
"""

import re

PLACEHOLDER = re.compile(r"\{([a-zA-Z0-9_]+)\}")
PARAM_PATTERN = r"([a-zA-Z0-9_]+)"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a route pattern into a regex with one group per placeholder."""
    # re.split with a capturing group alternates literal, name, literal, ...
    pieces = PLACEHOLDER.split(pattern)
    regex = "".join(
        PARAM_PATTERN if i % 2 else re.escape(piece) for i, piece in enumerate(pieces)
    )
    return re.compile(regex)


def parameter_names(pattern: str) -> list[str]:
    """Return placeholder names in pattern order."""
    return PLACEHOLDER.findall(pattern)


def match_path(pattern: str, path: str) -> tuple[str, ...] | None:
    """Match a normalized path against a normalized pattern.

    Returns the captured values positionally on success, ``None`` otherwise.
    """
    m = compile_pattern(pattern).fullmatch(path)
    if m is None:
        return None
    return m.groups()
