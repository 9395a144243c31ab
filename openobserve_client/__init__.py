"""Client library for the OpenObserve HTTP API: HTTP client, API calls and models."""

__version__ = "0.1.0"
__all__ = ["api", "client", "models"]