from dataclasses import dataclass
from datetime import datetime

from app.domain.services import secure_compare


@dataclass
class User:
    username: str
    password: str
    device_id: str | None = None

    def __post_init__(self):
        if not self.username:
            raise ValueError("username is required")

    def matches(self, password: str, device_id: str) -> bool:
        """
        True only when both the password and the device id match.
        Stored values are plain text, so this is exact equality.
        """
        password_ok = secure_compare(password, self.password or "")
        device_ok = secure_compare(device_id, self.device_id or "")
        return password_ok and device_ok


@dataclass
class Post:
    id: int
    title: str
    content: str
    slug: str
    status: str = "draft"
    created_at: datetime | None = None
