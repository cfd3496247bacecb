"""API credentials model."""
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Credentials:
    """API login and key, sent as query parameters on every request."""
    login: str
    key: str = field(repr=False)

    def __post_init__(self):
        if not isinstance(self.login, str) or not isinstance(self.key, str):
            raise TypeError("login and key must be strings")

    def to_params(self) -> Dict[str, str]:
        """Query parameters carrying the credentials."""
        return {'login': self.login, 'key': self.key}
