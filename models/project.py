from typing import List

from pydantic import BaseModel, Field


class Project(BaseModel):
    title: str
    description: str
    tags: List[str] = Field(default_factory=list)
    image: str
    link: str = "#"
