"""View-models adapting repository data for the list and detail screens."""

from .crime_detail import CrimeDetailViewModel
from .crime_list import CrimeListViewModel

__all__ = ["CrimeDetailViewModel", "CrimeListViewModel"]
