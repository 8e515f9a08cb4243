"""Wire models for the Gemini ``generateContent`` request body.

Field names follow the REST API: parts use snake_case (``inline_data``,
``mime_type``) while the generation config uses camelCase aliases.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InlineData(BaseModel):
    mime_type: str
    data: str


class Part(BaseModel):
    """One content part: either text or inline binary data."""

    text: str | None = None
    inline_data: InlineData | None = None


class Content(BaseModel):
    parts: list[Part]


class GenerationConfig(BaseModel):
    """Sampling parameters sent with each relay request.

    Attributes:
        max_output_tokens: Upper bound on generated tokens.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        top_k: Number of highest-probability tokens considered.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    max_output_tokens: int = Field(default=1000, ge=1)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_p: float = Field(default=0.8, ge=0.0, le=1.0)
    top_k: int = Field(default=40, ge=1)


class GenerateContentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contents: list[Content]
    generation_config: GenerationConfig | None = Field(default=None, alias="generationConfig")

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the API."""
        return self.model_dump(by_alias=True, exclude_none=True)
