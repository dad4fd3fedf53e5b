"""Client for the wiki endpoints of the Reddit API: data models and the wiki service."""

__version__ = "0.1.0"
__all__ = ["models", "wiki"]