"""Small utilities: assertion helpers, environment variable access, find and replace, rolling means and nanosecond duration conversion."""

__version__ = "0.1.0"
__all__ = ["asserts", "env", "find_and_replace", "rolling_mean", "durations"]