"""
Error types raised by the seller performance analysis.

Every error aborts the whole run; callers are expected to fix the input
upstream and try again.
"""

from typing import Any, Optional


class AnalysisError(Exception):
    """Base class for all analysis failures."""

    def __init__(
        self,
        message: str,
        *,
        dataset: Optional[str] = None,
        seller_id: Any = None,
        sku: Any = None,
    ):
        super().__init__(message)
        self.dataset = dataset
        self.seller_id = seller_id
        self.sku = sku


class MalformedInput(AnalysisError):
    """One of the input datasets is missing, not a sequence, or empty."""


class InvalidConfiguration(AnalysisError):
    """The analysis options (strategy hooks, policy, limits) are unusable."""


class UnresolvedReference(AnalysisError):
    """A purchase record points at an unknown seller or an unknown sku."""


class InvalidLineItem(AnalysisError):
    """A line item lacks a numeric field needed to price it."""
