"""
ArticleMetadata model for the metadata resolved from an HTML document.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ArticleMetadata(BaseModel):
    """
    Canonical article metadata.

    Built once per document by the metadata extractor and immutable
    afterwards.
    """
    model_config = ConfigDict(frozen=True)

    title: str = ""
    byline: Optional[str] = None
    excerpt: Optional[str] = None
    charset: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the metadata to a plain dictionary."""
        return self.model_dump(mode="json")
