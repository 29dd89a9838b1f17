from dataclasses import dataclass

from pos.application.responses import FieldError


@dataclass(frozen=True)
class ValidationResult:
    """Verdict of a validator: every violated rule, in field order."""

    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors
