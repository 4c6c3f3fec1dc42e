"""Format a number of seconds as HH:MM:SS."""


def human_readable_time(seconds: int) -> str:
    """Return ``seconds`` formatted as hours, minutes and seconds."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}:{second:02d}"