"""Beat catalog response schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Beat(BaseModel):
    """Catalog beat as exposed to the storefront."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    title: str
    producer: str
    producer_username: str
    producer_id: int
    price: float = Field(ge=0)
    genre: str
    bpm: int = Field(ge=1)
    key: str
    cover: str
    plays: int = 0
    likes: int = 0
    downloads: int = 0
    date: str
    verified: bool = False
    description: str = ""
    tags: list[str] = Field(default_factory=list)


class BeatListResponse(BaseModel):
    """Catalog listing envelope."""

    beats: list[Beat]
    total: int


class BeatDetailResponse(BaseModel):
    """Single beat envelope."""

    beat: Beat
