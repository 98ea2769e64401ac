"""Domain entity representing a directory user."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DeliveryPreferences:
    """Channels a user accepts notifications on."""

    in_app: bool = True
    email: bool = False


@dataclass
class User:
    """Recipient identity as stored in the user directory."""

    user_id: str
    username: str
    email: str
    preferences: DeliveryPreferences = field(default_factory=DeliveryPreferences)

    def accepts_in_app(self) -> bool:
        """Return ``True`` when the user wants in-app notifications."""

        return bool(self.preferences.in_app)
