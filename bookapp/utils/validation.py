"""Input patterns for user names and passwords."""
import re
from typing import Optional

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]{3,20}", re.ASCII)
# at least one lower, one upper, one digit and one of @$!%*?&; only those classes allowed
PASSWORD_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}",
    re.ASCII,
)


def is_valid_username(username: Optional[str]) -> bool:
    return bool(username) and USERNAME_PATTERN.fullmatch(username) is not None


def is_valid_password(password: Optional[str]) -> bool:
    return bool(password) and PASSWORD_PATTERN.fullmatch(password) is not None
