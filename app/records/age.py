from datetime import date


def calculate_age(birth_date: str, today: date | None = None) -> int:
    """Whole years between an ISO ``YYYY-MM-DD`` birth date and *today*.

    Raises:
        ValueError: if *birth_date* is not a real calendar date.
    """
    born = date.fromisoformat(birth_date)
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)
