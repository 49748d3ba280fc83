"""Exception types raised by plausible-docs.

INVARIANT: A configuration-type fault aborts the build. Nothing in this
package catches ``ConfigurationTypeError``; only the CLI converts it into
an exit code.
"""

from __future__ import annotations

import json
from typing import Any


class PlausibleDocsError(Exception):
    """Base class for all plausible-docs errors."""


class ConfigurationTypeError(PlausibleDocsError, TypeError):
    """A declared option resolved to a value that is not a string."""

    def __init__(self, option_name: str, value: Any) -> None:
        self.option_name = option_name
        self.value = value
        super().__init__(f"Unexpected {option_name} type: {_describe(value)}")


class UnknownOptionError(PlausibleDocsError, KeyError):
    """An option was read or written before it was declared."""

    def __init__(self, option_name: str) -> None:
        self.option_name = option_name
        super().__init__(option_name)

    def __str__(self) -> str:
        return f"Unknown option: {self.option_name}"


class DuplicateOptionError(PlausibleDocsError, ValueError):
    """An option name was declared twice on the same store."""

    def __init__(self, option_name: str) -> None:
        self.option_name = option_name
        super().__init__(f"Option already declared: {option_name}")


def _describe(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
