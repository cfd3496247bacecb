"""Account information models."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils import to_int, to_float, to_str, to_dict

UNLIMITED = -1


@dataclass
class TrafficInfo:
    """Traffic quota of an account. ``left == -1`` means unlimited."""
    left: Optional[int] = None
    used_24h: Optional[int] = None

    @property
    def is_unlimited(self) -> bool:
        return self.left == UNLIMITED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TrafficInfo':
        return cls(
            left=to_int(data.get('left')),
            used_24h=to_int(data.get('used_24h')),
        )


@dataclass
class AccountInfo:
    """
    Openload account information.

    Attributes:
        extid: External user id
        email: Account e-mail
        signup_at: Signup date as reported by the API
        storage_left: Storage left in bytes (-1 = unlimited)
        storage_used: Storage used in bytes
        traffic: Traffic quota
        balance: Account balance
    """
    extid: Optional[str] = None
    email: Optional[str] = None
    signup_at: Optional[str] = None
    storage_left: Optional[int] = None
    storage_used: Optional[int] = None
    traffic: TrafficInfo = field(default_factory=TrafficInfo)
    balance: Optional[float] = None

    @property
    def has_unlimited_storage(self) -> bool:
        """Check if storage is unlimited."""
        return self.storage_left == UNLIMITED

    @property
    def storage_used_gb(self) -> float:
        """Used storage in GB."""
        return (self.storage_used or 0) / (1024 ** 3)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AccountInfo':
        """Create from API result."""
        return cls(
            extid=to_str(data.get('extid')),
            email=to_str(data.get('email')),
            signup_at=to_str(data.get('signup_at')),
            storage_left=to_int(data.get('storage_left')),
            storage_used=to_int(data.get('storage_used')),
            traffic=TrafficInfo.from_dict(to_dict(data.get('traffic'))),
            balance=to_float(data.get('balance')),
        )

    def __str__(self) -> str:
        storage = "unlimited" if self.has_unlimited_storage else f"{self.storage_left} bytes left"
        return (
            f"Account: {self.email} ({self.extid})\n"
            f"Storage: {self.storage_used_gb:.2f} GB used, {storage}"
        )
