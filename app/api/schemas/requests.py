"""
Request schemas for API endpoints.

These models handle STRUCTURAL validation only (type, presence, basic length
limits). The configurable maximum text length is enforced again by the
analysis service.
"""

from pydantic import BaseModel, Field, field_validator

MAX_REVIEW_LENGTH = 10000


class AnalyzeRequest(BaseModel):
    """Defines the schema for a review analysis request.

    Attributes:
        text: The review text to analyze.

    Example:
        ```json
        {
            "text": "This movie was absolutely brilliant, a true masterpiece!"
        }
        ```
    """

    text: str = Field(
        ...,
        description="Movie review text to analyze. Maximum 10,000 characters.",
        min_length=1,
        max_length=MAX_REVIEW_LENGTH,
        examples=[
            "This movie was absolutely brilliant, a true masterpiece!",
            "Boring plot and terrible acting. Not worth watching.",
            "The film was not bad at all.",
        ],
    )

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Rejects whitespace-only text and strips surrounding whitespace.

        Raises:
            ValueError: If the text is empty or contains only whitespace.
        """
        if not v or not v.strip():
            raise ValueError(
                "The text field is required and cannot be empty or contain only whitespace."
            )
        return v.strip()
