import datetime as dt


def today() -> dt.date:
    """Current local calendar date."""
    return dt.date.today()


def yesterday(ref: dt.date) -> dt.date:
    return ref - dt.timedelta(days=1)
