"""Ports the application layer depends on."""

from pos.application.ports.unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
