"""Logger lookup for stylemix modules.

Every module logs under the ``stylemix.`` namespace:

- ``stylemix.parser``: WARNING when a call mixes bare and ``key: value``
  arguments and the bare values are dropped
- ``stylemix.resolver``: WARNING per unknown mixin, DEBUG per expansion
- ``stylemix.mixins.catalog``: DEBUG when the built-in catalog is built
  or caller mixins shadow built-ins

The library adds no handlers; configure ``logging.getLogger("stylemix")``
to see its output.
"""

from __future__ import annotations

import logging

_ROOT = "stylemix"


def get_logger(name: str) -> logging.Logger:
    """Logger for name, placed under ``stylemix.`` when it is not already.

    Example:
        >>> get_logger("stylemix.resolver").name, get_logger("mymodule").name
        ('stylemix.resolver', 'stylemix.mymodule')
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
