from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from typing_extensions import NotRequired, TypedDict

from .common import MemoryCategory, Sensitivity, ToolInput, UsPhone


class CreateMemoryInput(ToolInput):
    content: str = Field(min_length=1, description="Memory content to store")
    category: MemoryCategory = "general"
    relatedPhone: Optional[UsPhone] = Field(
        default=None,
        description="Phone number this memory relates to",
    )
    tags: Optional[List[str]] = Field(default=None, description="Tags for categorization")
    sensitivity: Sensitivity = "medium"


class SearchMemoriesInput(ToolInput):
    query: str = Field(description="Search query")
    category: Optional[MemoryCategory] = Field(default=None, description="Filter by category")
    relatedPhone: Optional[UsPhone] = Field(
        default=None,
        description="Filter by related phone number",
    )
    limit: int = Field(default=10, ge=1, le=50)


class GetContactMemoriesInput(ToolInput):
    phoneNumber: UsPhone = Field(description="Phone number to get memories for")
    limit: int = Field(default=20, ge=1, le=100)


class Memory(TypedDict):
    id: str
    content: str
    category: str
    relatedPhone: NotRequired[str]
    tags: NotRequired[List[str]]
    sensitivity: str
    createdAt: str
    updatedAt: str


class CreateMemoryOutput(TypedDict):
    success: bool
    memory: Memory


class SearchMemoriesOutput(TypedDict):
    memories: List[Memory]
    total: int


class GetContactMemoriesOutput(TypedDict):
    phoneNumber: str
    memories: List[Memory]
    total: int
    # AI-generated summary of the contact
    summary: NotRequired[str]
