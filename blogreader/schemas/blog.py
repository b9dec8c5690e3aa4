from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class PostRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str
    date: str
    tags: Optional[List[str]] = None
    excerpt: Optional[str] = None
    image: Optional[str] = None
