import logging
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from . import settings
from .errors import InvalidConfiguration
from .strategies import (
    BonusStrategy,
    RevenueStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)

logger = logging.getLogger(__name__)

UnresolvedPolicy = Literal["skip", "raise"]


class AnalysisOptions(BaseModel):
    """
    Knobs for a single analysis run. Defaults come from settings (and so from
    the environment / .env file).

    Any invalid value, passed in or picked up from the environment, raises
    InvalidConfiguration instead of a pydantic ValidationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    revenue_strategy: RevenueStrategy = calculate_simple_revenue
    bonus_strategy: BonusStrategy = calculate_bonus_by_profit
    unresolved_policy: UnresolvedPolicy = Field(
        default_factory=lambda: settings.UNRESOLVED_POLICY
    )
    round_intermediate: bool = Field(default_factory=lambda: settings.ROUND_INTERMEDIATE)
    top_products_limit: int = Field(
        default_factory=lambda: settings.TOP_PRODUCTS_LIMIT, ge=1
    )

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise InvalidConfiguration(f"Invalid analysis options ({fields}): {e}") from e

    @model_validator(mode="after")
    def check_policy_and_limit(self) -> "AnalysisOptions":
        # default_factory values skip field validation, so an odd env value lands here
        if self.unresolved_policy not in ("skip", "raise"):
            raise ValueError(
                f"Unknown unresolved_policy {self.unresolved_policy!r}; "
                "expected 'skip' or 'raise'"
            )
        if self.top_products_limit < 1:
            raise ValueError(
                f"top_products_limit must be at least 1, got {self.top_products_limit}"
            )
        return self


def resolve_options(
    options: Optional["AnalysisOptions | Mapping[str, Any]"] = None,
) -> AnalysisOptions:
    """Accepts None, an AnalysisOptions or a plain mapping of option names."""
    if options is None:
        return AnalysisOptions()
    if isinstance(options, AnalysisOptions):
        return options
    if isinstance(options, Mapping):
        logger.debug(f"Building analysis options from: {sorted(options)}")
        return AnalysisOptions(**options)
    raise InvalidConfiguration(
        f"Options must be a mapping or AnalysisOptions, got {type(options).__name__}"
    )
