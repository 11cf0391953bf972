"""Schedule risk analysis collaborators."""

from .base import (
    RiskAnalysisError,
    RiskAnalyzer,
    RiskRequest,
    build_risk_prompt,
    parse_risks,
    risk_response_schema,
)

__all__ = [
    'RiskAnalyzer',
    'RiskRequest',
    'RiskAnalysisError',
    'build_risk_prompt',
    'parse_risks',
    'risk_response_schema',
]
