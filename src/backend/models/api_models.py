from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from film_degrees.models import PersonNode

# Request Models
class PersonRef(BaseModel):
    """An actor picked by the client, usually from /api/search-actor."""
    type: Literal["person", "actor"] = "person"
    id: int = Field(..., gt=0, description="TMDB person id")
    name: str = Field("", description="Display name")
    image_path: Optional[str] = Field(None, description="TMDB profile image path")

    def to_node(self) -> PersonNode:
        return PersonNode(id=self.id, name=self.name, image_path=self.image_path)

class FindPathRequest(BaseModel):
    """Request to connect two actors."""
    actor1: PersonRef
    actor2: PersonRef

# Response Models
class EnrichedNode(BaseModel):
    """A path node with its IMDb id, when one could be looked up."""
    type: Literal["person", "film"]
    id: int
    name: str
    image_path: Optional[str] = None
    imdb_id: Optional[str] = None

class FindPathResponse(BaseModel):
    """A connecting chain of actors and films."""
    path: List[EnrichedNode]
    degrees: int = Field(..., description="Number of films between the two actors")

class ActorSearchHit(BaseModel):
    id: int
    name: str
    profile_path: Optional[str] = None
    popularity: float = 0.0
    known_for: Optional[str] = Field(None, description="Up to two titles the actor is known for")

class ActorSearchResponse(BaseModel):
    results: List[ActorSearchHit] = Field(default_factory=list)
