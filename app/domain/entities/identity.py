"""Domain entity describing an authenticated caller."""

from dataclasses import dataclass

ROLE_CLIENT = "client"
ROLE_PROVIDER = "provider"


@dataclass(frozen=True)
class Identity:
    """Stable user identifier and account role resolved upstream."""

    user_id: str
    role: str

    def is_provider(self) -> bool:
        """Return ``True`` when the caller offers equipment for rent."""

        return self.role.lower() == ROLE_PROVIDER


__all__ = ["Identity", "ROLE_CLIENT", "ROLE_PROVIDER"]
