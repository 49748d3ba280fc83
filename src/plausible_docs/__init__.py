"""plausible-docs: Plausible Analytics tracking for generated documentation."""

from __future__ import annotations

__version__ = "0.1.0"
