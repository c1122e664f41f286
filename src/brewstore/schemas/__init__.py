"""Data-transfer objects exposed at the service boundary."""

from .base import TransferModel
from .beer import BeerDTO
from .customer import CustomerDTO

__all__ = ["BeerDTO", "CustomerDTO", "TransferModel"]
