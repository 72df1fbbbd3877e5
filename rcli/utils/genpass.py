"""Random password generation."""

from __future__ import annotations

import secrets

from rcli.errors import ConfigurationError

# Visually ambiguous characters (I, O, l, o, 0, 1) are left out.
UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghijkmnpqrstuvwxyz"
NUMBER = "23456789"
SYMBOL = "!@#$%^&*_"

_random = secrets.SystemRandom()


def generate_password(
    length: int = 16,
    *,
    uppercase: bool = True,
    lowercase: bool = True,
    number: bool = True,
    symbol: bool = True,
) -> str:
    """Generate a password with at least one character from each enabled class.

    Args:
        length: Total number of characters
        uppercase: Include uppercase letters
        lowercase: Include lowercase letters
        number: Include digits
        symbol: Include symbols

    Returns:
        The generated password

    Raises:
        ConfigurationError: If no class is enabled or ``length`` is too short
    """
    classes = [
        charset
        for enabled, charset in (
            (uppercase, UPPER),
            (lowercase, LOWER),
            (number, NUMBER),
            (symbol, SYMBOL),
        )
        if enabled
    ]
    if not classes:
        raise ConfigurationError("At least one character class must be enabled")
    if length < len(classes):
        raise ConfigurationError(
            f"Password length {length} is shorter than the {len(classes)} enabled character classes"
        )

    alphabet = "".join(classes)
    chars = [secrets.choice(charset) for charset in classes]
    chars.extend(secrets.choice(alphabet) for _ in range(length - len(classes)))
    _random.shuffle(chars)
    return "".join(chars)
