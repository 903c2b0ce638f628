from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field

# --- Graph nodes ---

class PersonNode(BaseModel):
    """A person (actor) in the person/film graph."""
    type: Literal["person"] = "person"
    id: int = Field(..., description="Provider-scoped person id")
    name: str = Field("", description="Display name")
    image_path: Optional[str] = Field(None, description="Provider-relative profile image path")

    @property
    def key(self) -> Tuple[str, int]:
        return (self.type, self.id)


class FilmNode(BaseModel):
    """A film in the person/film graph."""
    type: Literal["film"] = "film"
    id: int = Field(..., description="Provider-scoped film id")
    name: str = Field("", description="Display title")
    image_path: Optional[str] = Field(None, description="Provider-relative poster image path")

    @property
    def key(self) -> Tuple[str, int]:
        return (self.type, self.id)


Node = Annotated[Union[PersonNode, FilmNode], Field(discriminator="type")]

# Alternating person/film sequence, origin first
Path = List[Union[PersonNode, FilmNode]]

# --- Provider records ---

class FilmCredit(BaseModel):
    """One film in a person's credits, as ranked by the provider."""
    id: int
    title: str = ""
    poster_path: Optional[str] = None
    popularity: float = 0.0
    vote_count: int = 0
    release_date: Optional[str] = None

    def to_node(self) -> FilmNode:
        return FilmNode(id=self.id, name=self.title, image_path=self.poster_path)


class CastCredit(BaseModel):
    """One cast member of a film, as billed by the provider."""
    id: int
    name: str = ""
    profile_path: Optional[str] = None
    character: Optional[str] = None
    order: int = Field(0, description="Billing order, 0 is top billed")

    def to_node(self) -> PersonNode:
        return PersonNode(id=self.id, name=self.name, image_path=self.profile_path)


class KnownFor(BaseModel):
    title: Optional[str] = None
    name: Optional[str] = None
    media_type: Optional[str] = None


class PersonSearchResult(BaseModel):
    """A person hit from a name search."""
    id: int
    name: str
    profile_path: Optional[str] = None
    known_for_department: Optional[str] = None
    popularity: float = 0.0
    known_for: List[KnownFor] = Field(default_factory=list)

    def to_node(self) -> PersonNode:
        return PersonNode(id=self.id, name=self.name, image_path=self.profile_path)
