from abc import ABC, abstractmethod

from foodtrucks.types import TimeContext, TruckListing


class BaseSource(ABC):
    @abstractmethod
    def fetch_listings(self, ctx: TimeContext) -> list[TruckListing]:
        """
        Implement query -> fetch -> decode for the day in ctx. Returns listings in source order, unfiltered.
        """
        raise NotImplementedError
