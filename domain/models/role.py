"""
Role domain model.
"""

from enum import Enum


class Role(str, Enum):
    """
    Structural role a participant can fill inside a group.

    Declaration order is the canonical role order used for reporting and
    for breaking fill-order ties.
    """

    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"

    @classmethod
    def parse(cls, value: "str | Role") -> "Role":
        """
        Resolve a role from its value or member name (case-insensitive).

        Raises:
            ValueError: If the value names no known role
        """
        if isinstance(value, Role):
            return value
        text = str(value).strip()
        for role in cls:
            if text.lower() in (role.value.lower(), role.name.lower()):
                return role
        raise ValueError(f"Unknown role: {value!r}")

    def __str__(self) -> str:
        return self.value
