"""
ParentCare Models - Provider Responses
Tagged union of the three response shapes the provider client returns
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Citation(BaseModel):
    """Web reference of one grounding chunk, exactly as the provider reported it"""

    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    title: Optional[str] = None


class ImagePayload(BaseModel):
    """Raw inline image bytes plus their MIME type"""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: Optional[str] = None


class ResponsePart(BaseModel):
    """One content part of a candidate: text or inline binary data"""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    inline_data: Optional[ImagePayload] = None


class TextResponse(BaseModel):
    """Plain generated text"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: Optional[str] = None


class GroundedTextResponse(BaseModel):
    """Generated text backed by a search step, with the first candidate's citations"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["grounded"] = "grounded"
    text: Optional[str] = None
    citations: List[Citation] = Field(default_factory=list)


class ImageResponse(BaseModel):
    """Content parts of the first candidate of an image-output call"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    parts: List[ResponsePart] = Field(default_factory=list)


ProviderResponse = Union[TextResponse, GroundedTextResponse, ImageResponse]
