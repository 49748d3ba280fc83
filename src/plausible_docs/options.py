"""Option declarations and the reference option store.

The host documentation generator owns option storage. ``register()``
only talks to it through ``add_declaration()``, so any host exposing that
method (the :class:`OptionStore` below, the Sphinx adapter in
:mod:`plausible_docs.sphinx`) can receive the Plausible options.

Resolution order inside :class:`OptionStore` (highest to lowest):
  1. Values set via ``set_value()`` / ``set_values()``
  2. The declaration's ``default_value``
  3. ``""`` for string options without a default
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel

from plausible_docs.errors import DuplicateOptionError, UnknownOptionError

logger = logging.getLogger(__name__)

SITE_DOMAIN_OPTION = "plausibleSiteDomain"
SITE_ORIGIN_OPTION = "plausibleSiteOrigin"
DEFAULT_SITE_ORIGIN = "plausible.io/js/"


class ParameterType(StrEnum):
    """Value types a host option can declare."""

    STRING = "string"


class OptionDeclaration(BaseModel):
    """A named, typed setting registered with the host."""

    model_config = {"frozen": True}

    name: str
    type: ParameterType = ParameterType.STRING
    help: str = ""
    default_value: str | None = None

    def resolved_default(self) -> str:
        """Default the host reports when the user leaves the option unset."""
        return "" if self.default_value is None else self.default_value


class OptionDeclarer(Protocol):
    """Host capability used by :func:`register`."""

    def add_declaration(self, declaration: OptionDeclaration) -> None: ...


class ResolvedOptions(Protocol):
    """Read-only view of the options after the host merged every source."""

    def get_value(self, name: str) -> object: ...


class OptionStore:
    """In-process option system with declarations, defaults, and user values.

    Values are stored as given; no coercion happens here. Type enforcement
    is left to the consumer so that a misconfigured value surfaces where it
    is used.
    """

    def __init__(self) -> None:
        self._declarations: dict[str, OptionDeclaration] = {}
        self._values: dict[str, Any] = {}

    def add_declaration(self, declaration: OptionDeclaration) -> None:
        """Declare an option. Raises :class:`DuplicateOptionError` on reuse."""
        if declaration.name in self._declarations:
            raise DuplicateOptionError(declaration.name)
        self._declarations[declaration.name] = declaration

    def is_declared(self, name: str) -> bool:
        return name in self._declarations

    def declarations(self) -> list[OptionDeclaration]:
        """Return declarations in registration order."""
        return list(self._declarations.values())

    def set_value(self, name: str, value: Any) -> None:
        """Set a user value for a declared option."""
        if name not in self._declarations:
            raise UnknownOptionError(name)
        self._values[name] = value

    def set_values(self, values: Mapping[str, Any]) -> list[str]:
        """Apply every declared key from *values*; return the ignored keys.

        Config files are shared with the host, so undeclared keys are
        skipped rather than rejected.
        """
        ignored: list[str] = []
        for name, value in values.items():
            if name in self._declarations:
                self._values[name] = value
            else:
                ignored.append(name)
        return ignored

    def get_value(self, name: str) -> object:
        """Return the resolved value for a declared option."""
        declaration = self._declarations.get(name)
        if declaration is None:
            raise UnknownOptionError(name)
        if name in self._values:
            return self._values[name]
        return declaration.resolved_default()

    def is_set(self, name: str) -> bool:
        """Whether the user supplied a value (as opposed to the default)."""
        return name in self._values


def register(options: OptionDeclarer) -> None:
    """Declare the Plausible options on the host option system.

    Called once per build, before the host parses user configuration.
    """
    declarations = (
        OptionDeclaration(
            name=SITE_DOMAIN_OPTION,
            type=ParameterType.STRING,
            help="Domain name used by Plausible Analytics.",
        ),
        OptionDeclaration(
            name=SITE_ORIGIN_OPTION,
            type=ParameterType.STRING,
            help=(
                "Origin the Plausible script is served from, including the path "
                "but excluding the trailing script.js."
            ),
            default_value=DEFAULT_SITE_ORIGIN,
        ),
    )
    for declaration in declarations:
        options.add_declaration(declaration)
        logger.debug("Declared option: %s", declaration.name)
