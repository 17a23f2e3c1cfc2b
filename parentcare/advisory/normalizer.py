"""
Response Normalizer
Pure functions turning provider responses into display-ready values.
"""

import base64
from typing import List, Optional

from parentcare.models.advisory import Source
from parentcare.models.provider import (
    GroundedTextResponse,
    ImageResponse,
    ProviderResponse,
    TextResponse,
)

DEFAULT_IMAGE_MIME_TYPE = "image/png"


def _unsupported(response: object) -> TypeError:
    return TypeError(f"Unsupported provider response: {type(response).__name__}")


def normalize_text(response: ProviderResponse, default: str) -> str:
    """
    Return the response text, or ``default`` when the provider produced none.

    Image responses contribute the text of their parts, in order.
    """
    if isinstance(response, (TextResponse, GroundedTextResponse)):
        text = response.text
    elif isinstance(response, ImageResponse):
        text = "".join(part.text for part in response.parts if part.text)
    else:
        raise _unsupported(response)

    return text if text else default


def normalize_sources(response: ProviderResponse) -> List[Source]:
    """
    Map grounding citations to sources, in provider order.

    Citations missing a URI or a title are dropped. Duplicate URIs are kept.
    Non-grounded responses have no sources.
    """
    if isinstance(response, GroundedTextResponse):
        return [
            Source(uri=citation.uri, title=citation.title)
            for citation in response.citations
            if citation.uri and citation.title
        ]
    if isinstance(response, (TextResponse, ImageResponse)):
        return []
    raise _unsupported(response)


def normalize_image(response: ProviderResponse) -> Optional[str]:
    """
    Return the first inline image of the response as a ``data:`` URI.

    Later image parts are ignored; ``None`` when there is no image.
    """
    if isinstance(response, ImageResponse):
        for part in response.parts:
            if part.inline_data is not None and part.inline_data.data:
                mime_type = part.inline_data.mime_type or DEFAULT_IMAGE_MIME_TYPE
                encoded = base64.b64encode(part.inline_data.data).decode("ascii")
                return f"data:{mime_type};base64,{encoded}"
        return None
    if isinstance(response, (TextResponse, GroundedTextResponse)):
        return None
    raise _unsupported(response)
