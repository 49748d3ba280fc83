"""Pydantic models for the persisted Plausible options.

Sparse JSON contract: ``docs.json`` is shared with the documentation
generator, so only the two Plausible keys are read and everything else
is left to the host.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from plausible_docs.options import SITE_DOMAIN_OPTION, SITE_ORIGIN_OPTION


class PlausibleOptions(BaseModel):
    """``plausibleSiteDomain`` / ``plausibleSiteOrigin`` as found in config.

    Values are kept as loaded (``Any``) so that a wrong type reaches the
    markup generator and fails there with the option name attached.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    site_domain: Any = Field(default=None, alias=SITE_DOMAIN_OPTION)
    site_origin: Any = Field(default=None, alias=SITE_ORIGIN_OPTION)

    def with_overrides(
        self,
        *,
        site_domain: str | None = None,
        site_origin: str | None = None,
    ) -> PlausibleOptions:
        """Return a copy with the non-None overrides applied."""
        update: dict[str, Any] = {}
        if site_domain is not None:
            update["site_domain"] = site_domain
        if site_origin is not None:
            update["site_origin"] = site_origin
        return self.model_copy(update=update)

    def as_option_values(self) -> dict[str, Any]:
        """Option-name keyed values for the fields the user actually set."""
        return self.model_dump(by_alias=True, exclude_none=True)

