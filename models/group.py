from dataclasses import dataclass
from typing import Tuple


@dataclass
class Group:
    category: str       # e.g. branch "CSE"
    subcategory: str    # e.g. section "1"
    size: int           # Students to seat

    @property
    def key(self) -> Tuple[str, str]:
        return (self.category, self.subcategory)

    @property
    def label(self) -> str:
        return f"{self.category}-{self.subcategory}"
