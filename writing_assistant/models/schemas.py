# Pydantic models for API requests
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PromptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic_type: str = Field(default="", alias="topicType")
    prompt_type: str = Field(default="", alias="promptType")
    question: str = ""
    content: str = ""
    temperature: Optional[float] = None

    @field_validator("topic_type", "prompt_type", "question", "content", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v


class PromptResponse(BaseModel):
    result: str


class ActionOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt_type: str = Field(alias="promptType")
    name: str
    tooltip: str
    group: str
    require_content: bool = Field(alias="requireContent")


class ActionCatalog(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic_types: List[str] = Field(alias="topicTypes")
    actions: List[ActionOption]
