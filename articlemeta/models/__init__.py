"""
Central re-exports for the articlemeta data models.
"""
from .metadata import ArticleMetadata

__all__ = [
    "ArticleMetadata",
]
