"""Template store management for tmaker."""

from .fetcher import GitTemplateFetcher, TemplateFetcher
from .store import init_template_store, is_initialized

__all__ = [
    "GitTemplateFetcher",
    "TemplateFetcher",
    "init_template_store",
    "is_initialized",
]
