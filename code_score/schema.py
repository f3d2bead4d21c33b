"""
Wire schema for analysis results.
Every result is validated here before it is sent or printed as JSON.
"""

from typing import List, Literal

from pydantic import BaseModel, Field, ValidationError, model_validator

from .config import CATEGORY_MAX, DEFAULT_MAX_RECOMMENDATIONS
from .exceptions import SchemaViolationError
from .models import AnalysisResult, Breakdown
from .results import calculate_overall_score


class BreakdownSchema(BaseModel):
    naming: int = Field(..., ge=0, le=CATEGORY_MAX['naming'])
    modularity: int = Field(..., ge=0, le=CATEGORY_MAX['modularity'])
    comments: int = Field(..., ge=0, le=CATEGORY_MAX['comments'])
    formatting: int = Field(..., ge=0, le=CATEGORY_MAX['formatting'])
    reusability: int = Field(..., ge=0, le=CATEGORY_MAX['reusability'])
    best_practices: int = Field(..., ge=0, le=CATEGORY_MAX['best_practices'])


class AnalysisSchema(BaseModel):
    overall_score: int = Field(..., ge=0, le=100, description="Weighted total, 0-100")
    breakdown: BreakdownSchema
    recommendations: List[str] = Field(
        ..., min_length=1, max_length=DEFAULT_MAX_RECOMMENDATIONS,
        description="Recommendations in category order"
    )
    file_name: str
    file_size: int = Field(..., ge=0, description="Content size in bytes")
    file_content: str
    file_type: Literal['js', 'jsx', 'py']

    @model_validator(mode='after')
    def validate_overall_score(self) -> 'AnalysisSchema':
        """overall_score must be derived from the breakdown, never set independently."""
        expected = calculate_overall_score(Breakdown(**self.breakdown.model_dump()))
        if self.overall_score != expected:
            raise ValueError(
                f"overall_score {self.overall_score} does not match breakdown total ({expected})"
            )
        return self

    model_config = {
        'json_schema_extra': {
            'example': {
                'overall_score': 85,
                'breakdown': {
                    'naming': 10,
                    'modularity': 20,
                    'comments': 15,
                    'formatting': 15,
                    'reusability': 11,
                    'best_practices': 14,
                },
                'recommendations': ["Replace magic numbers with named constants"],
                'file_name': "example.py",
                'file_size': 512,
                'file_content': "...",
                'file_type': "py",
            }
        }
    }


class ErrorResponse(BaseModel):
    message: str


def validate_result(result: AnalysisResult) -> AnalysisSchema:
    """Validate a result against the wire schema.

    Raises SchemaViolationError when the engine produced an out-of-range result.
    """
    try:
        return AnalysisSchema.model_validate(result.to_dict())
    except ValidationError as e:
        raise SchemaViolationError(str(e)) from e
