"""Phone sanity check for new contacts. Phones are stored as typed; this only flags ones that do not parse."""

from collections.abc import Callable

import phonenumbers


def check_phone(raw: str, region: str | None = None) -> bool:
    """True if raw is a valid number. Numbers without a leading + are read in region."""
    try:
        number = phonenumbers.parse(raw.strip(), region)
    except phonenumbers.NumberParseException:
        return False
    return phonenumbers.is_valid_number(number)


def phone_checker(region: str | None) -> Callable[[str], bool]:
    """check_phone bound to one region, for CommandContext.check_phone."""

    def check(raw: str) -> bool:
        return check_phone(raw, region)

    return check
