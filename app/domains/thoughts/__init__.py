from app.domains.thoughts.entities import Thought
from app.domains.thoughts.schemas import (
    ThoughtCreate, ThoughtUpdate, ThoughtResponse, ThoughtListResponse
)
from app.domains.thoughts.services import ThoughtService, ThoughtListQuery, apply_list_query

__all__ = [
    "Thought",
    "ThoughtCreate", "ThoughtUpdate", "ThoughtResponse", "ThoughtListResponse",
    "ThoughtService", "ThoughtListQuery", "apply_list_query"
]
