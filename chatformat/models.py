from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class FileData(ApiModel):
    mime_type: str = Field(..., min_length=1)
    file_uri: str = Field(..., min_length=1)


class Part(ApiModel):
    file_data: Optional[FileData] = None
    text: Optional[str] = None

    @model_validator(mode="after")
    def validate_variant(self) -> "Part":
        if (self.file_data is None) == (self.text is None):
            raise ValueError("part requires exactly one of 'fileData' or 'text'")
        return self

    @property
    def is_file_reference(self) -> bool:
        return self.file_data is not None


class Message(ApiModel):
    role: Literal["user", "model"]
    parts: List[Part]

    @model_validator(mode="after")
    def validate_part_order(self) -> "Message":
        seen_text = False
        for part in self.parts:
            if part.is_file_reference and seen_text:
                raise ValueError("fileData parts must come before text parts")
            if not part.is_file_reference:
                seen_text = True
        return self


class SystemInstruction(ApiModel):
    parts: List[Part]


class GenerationConfig(ApiModel):
    temperature: float = 0.2
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 2048


class RequestPayload(ApiModel):
    system_instruction: SystemInstruction
    contents: List[Message]
    generation_config: GenerationConfig = Field(default_factory=GenerationConfig)


class MockSession(BaseModel):
    model_config = ConfigDict(extra="forbid")

    file_uri: str
    original_mime_type: Optional[str] = None
    system_instruction: str
    history: List[Message] = Field(default_factory=list)
