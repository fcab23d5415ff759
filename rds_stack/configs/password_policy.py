"""
Generation policy for the database admin credential.

The excluded characters would break the MySQL connection string or the JSON
secret template; the remaining punctuation is what the generator may use.
"""

import json
import string
from dataclasses import dataclass, field
from typing import Any

from rds_stack.configs.constants import (
    PASSWORD_EXCLUDE_CHARACTERS,
    PASSWORD_LENGTH,
    SECRET_GENERATE_KEY,
    SECRET_STRING_TEMPLATE,
)


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Generated-credential policy.

    Attributes:
        length: Password length
        exclude_characters: Characters the password must never contain
        require_each_included_type: Require lower, upper, digit and punctuation
        template: Static JSON fields of the secret
        generate_key: Field that receives the generated password
    """
    length: int = PASSWORD_LENGTH
    exclude_characters: str = PASSWORD_EXCLUDE_CHARACTERS
    require_each_included_type: bool = True
    template: dict[str, str] = field(default_factory=lambda: dict(SECRET_STRING_TEMPLATE))
    generate_key: str = SECRET_GENERATE_KEY

    def allowed_special(self) -> str:
        """ASCII punctuation that survives the exclusion set."""
        return "".join(c for c in string.punctuation if c not in self.exclude_characters)

    def random_password_args(self) -> dict[str, Any]:
        """Keyword arguments for pulumi_random.RandomPassword."""
        special = self.allowed_special()
        minimum = 1 if self.require_each_included_type else 0
        return {
            "length": self.length,
            "special": bool(special),
            "override_special": special,
            "min_lower": minimum,
            "min_upper": minimum,
            "min_numeric": minimum,
            "min_special": minimum if special else 0,
        }

    def render(self, password: str, **fields: Any) -> str:
        """
        Build the secret string from the template.

        Args:
            password: Generated password
            **fields: Extra connection fields (host, port, engine, ...)

        Returns:
            JSON secret string
        """
        return json.dumps({**self.template, self.generate_key: password, **fields})
