from datetime import date


def calculate_age(date_of_birth: date, reference_date: date) -> int:
    """Return the age in whole years on ``reference_date``.

    One year is subtracted when the birthday has not yet come round in the
    reference year. Month/day tuples are compared as-is, so a 29 February
    birthday counts as reached on 1 March of a non-leap year.
    """
    age = reference_date.year - date_of_birth.year
    if (reference_date.month, reference_date.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
