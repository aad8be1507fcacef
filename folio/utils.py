import datetime
import math

WORDS_PER_MINUTE = 200


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min"


def format_date(value: datetime.datetime) -> str:
    # Day/month/year without zero padding, e.g. 1/1/2025
    return f"{value.day}/{value.month}/{value.year}"
