"""Shared validation utilities"""

import re
from datetime import datetime, time
from typing import Optional

TIME_OF_DAY_FORMAT = "%H:%M:%S"


def parse_time_of_day(value) -> time:
    """
    Parse a time of day in HH:MM:SS format.

    Args:
        value: "HH:MM:SS" string or an existing time

    Returns:
        datetime.time without microseconds

    Raises:
        ValueError: If the value is not a valid HH:MM:SS time
    """
    if isinstance(value, time):
        return value.replace(microsecond=0)
    if not isinstance(value, str):
        raise ValueError("Time must be a string in HH:MM:SS format")
    try:
        return datetime.strptime(value.strip(), TIME_OF_DAY_FORMAT).time()
    except ValueError as e:
        raise ValueError("Time must be in HH:MM:SS format") from e


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate and normalize a phone number.

    Keeps a leading "+" and the digits; 8 to 15 digits are accepted.

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    phone = phone.strip()
    prefix = "+" if phone.startswith("+") else ""
    digits = re.sub(r"\D", "", phone)

    if not 8 <= len(digits) <= 15:
        raise ValueError("Phone number must contain between 8 and 15 digits")

    return f"{prefix}{digits}"


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email
