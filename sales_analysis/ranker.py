import logging
from typing import Iterable, NamedTuple

from .schemas import SellerAccumulator
from .strategies import BonusStrategy

logger = logging.getLogger(__name__)


class RankedSeller(NamedTuple):
    rank: int
    seller: SellerAccumulator
    bonus: float


def rank_sellers(
    accumulators: Iterable[SellerAccumulator], bonus_strategy: BonusStrategy
) -> list[RankedSeller]:
    """
    Orders sellers by profit, highest first, and works out each bonus.
    sorted() is stable with reverse=True too, so equal profits keep the
    order the sellers had in the input.
    """
    ordered = sorted(accumulators, key=lambda seller: seller.profit, reverse=True)
    total = len(ordered)

    ranked = [
        RankedSeller(rank, seller, bonus_strategy(rank, total, seller))
        for rank, seller in enumerate(ordered)
    ]
    if ranked:
        logger.info(
            f"  > Ranked {total} sellers. Top: {ranked[0].seller.name} "
            f"(profit {ranked[0].seller.profit:.2f})"
        )
    return ranked
