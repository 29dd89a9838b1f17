"""Purchasing domain: providers."""

from pos.domain.purchasing.entities import Provider
from pos.domain.purchasing.repositories import ProviderRepository

__all__ = ["Provider", "ProviderRepository"]
