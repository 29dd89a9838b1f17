from pos.domain.purchasing.repositories.provider_repository import ProviderRepository

__all__ = ["ProviderRepository"]
