"""Client for the LinkedIn Marketing API: HTTP client, pagination, errors and resource helpers."""

__version__ = "0.1.0"