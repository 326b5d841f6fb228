from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Image:
    """Product or variant image hosted by the commerce CDN."""
    url: str
    alt_text: Optional[str] = None
    id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def __str__(self):
        return self.alt_text or self.url
