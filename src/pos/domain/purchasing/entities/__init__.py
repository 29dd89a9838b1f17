from pos.domain.purchasing.entities.provider import Provider

__all__ = ["Provider"]
