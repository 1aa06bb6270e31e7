"""
Post Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class CreatePostCommand(BaseModel):
    """Create post command - title and body of a new post"""

    title: str
    text: str
