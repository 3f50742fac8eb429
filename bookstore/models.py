from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class Book(BaseModel):
    # Field values other than id are kept exactly as they arrived in the
    # request body; only create checks title and author for presence.
    id: int
    title: Any
    author: Any
    genre: Any = "Unknown"
    copies_available: Any = Field(0, alias="copiesAvailable")

    model_config = ConfigDict(populate_by_name=True)
