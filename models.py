# slide_generation_service/models.py
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import List


class TextPayload(BaseModel):
    text: StrictStr = Field(min_length=1)


class Slide(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: StrictStr
    content: List[StrictStr]
    speakerNotes: StrictStr


class Presentation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slides: List[Slide]


class ErrorMessage(BaseModel):
    message: str
