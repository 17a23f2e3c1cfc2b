"""
ParentCare Models - Advisory Results
Normalized shapes handed back to the application shell for display
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Source(BaseModel):
    """A citation the answer is grounded on"""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)


class AdvisoryResult(BaseModel):
    """Answer text plus the sources it was grounded on (possibly none)"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "2岁左右是开始如厕训练的常见时机……",
                "sources": [
                    {
                        "uri": "https://www.healthychildren.org/toilet-training",
                        "title": "Toilet Training - HealthyChildren.org",
                    }
                ],
            }
        }
    )

    text: str
    sources: List[Source] = Field(default_factory=list)


class EmergencyGuideResult(BaseModel):
    """First aid steps with an optional illustration as a data URI"""

    text: str
    image_url: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return self.image_url is not None
