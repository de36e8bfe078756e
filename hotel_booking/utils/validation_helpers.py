from datetime import date


def nights_between(check_in_date: date, check_out_date: date) -> int:
    return (check_out_date - check_in_date).days
