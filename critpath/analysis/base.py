"""Risk analysis interface and provider-neutral prompt construction."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..models.result import ScheduleResult
from ..models.task import ScheduleRisk

LANGUAGE_NAMES = {
    'en': 'English',
    'hi': 'Hindi',
    'bn': 'Bengali',
}


class RiskAnalysisError(RuntimeError):
    """The risk analyzer could not produce a usable answer."""


@dataclass(frozen=True)
class RiskRequest:
    """What a risk analyzer needs to know about a computed schedule."""

    critical_path: List[str]
    project_duration: int
    location: str
    language: str = 'en'
    duration_unit: str = field(default='days')

    @classmethod
    def from_result(cls, result: ScheduleResult, location: str, language: str = 'en') -> 'RiskRequest':
        """Build a request from the critical path of a computed schedule."""
        return cls(
            critical_path=result.critical_path_names,
            project_duration=result.project_duration,
            location=location,
            language=language,
        )


def build_risk_prompt(request: RiskRequest, max_risks: int = 3) -> str:
    """Build the risk analysis prompt for a request."""
    if request.language not in LANGUAGE_NAMES:
        raise RiskAnalysisError(f"Unsupported language: {request.language}")
    if not request.critical_path:
        raise RiskAnalysisError("Schedule has no critical path; compute it before analyzing risks")

    low = min(2, max_risks)
    return (
        f"Act as a senior project manager in {request.location}, India. "
        f"Analyze this project schedule for potential risks. "
        f"The project duration is {request.project_duration} {request.duration_unit}, "
        f"and the critical path is: {' -> '.join(request.critical_path)}. "
        f"Consider local factors for {request.location} like weather (monsoon), labor availability, "
        f"and potential supply chain disruptions. "
        f"Identify {low}-{max_risks} key risks, their potential impact, and practical mitigation strategies. "
        f"Provide the output in {LANGUAGE_NAMES[request.language]}. "
        f"The response must be a JSON object matching the provided schema."
    )


def risk_response_schema() -> Dict[str, Any]:
    """Structured-output schema for the risk list."""
    return {
        'type': 'OBJECT',
        'properties': {
            'risks': {
                'type': 'ARRAY',
                'description': 'A list of 2-3 potential risks identified in the project schedule.',
                'items': {
                    'type': 'OBJECT',
                    'properties': {
                        'risk': {
                            'type': 'STRING',
                            'description': "A concise description of the potential risk (e.g., 'Monsoon Delay Risk').",
                        },
                        'impact': {
                            'type': 'STRING',
                            'description': 'How this risk could impact the project timeline or costs.',
                        },
                        'mitigation': {
                            'type': 'STRING',
                            'description': 'A practical suggestion to mitigate or prepare for this risk.',
                        },
                    },
                    'required': ['risk', 'impact', 'mitigation'],
                },
            },
        },
        'required': ['risks'],
    }


def parse_risks(payload: Any) -> List[ScheduleRisk]:
    """Validate a decoded response payload into risk entries."""
    if not isinstance(payload, dict):
        raise RiskAnalysisError(f"Expected a JSON object, got {type(payload).__name__}")

    entries = payload.get('risks') or []
    if not isinstance(entries, list):
        raise RiskAnalysisError("'risks' must be a list")

    risks = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise RiskAnalysisError(f"Malformed risk entry: {entry!r}")
        missing = [key for key in ('risk', 'impact', 'mitigation') if not isinstance(entry.get(key), str)]
        if missing:
            raise RiskAnalysisError(f"Risk entry missing {', '.join(missing)}: {entry!r}")
        risks.append(ScheduleRisk(
            risk=entry['risk'],
            impact=entry['impact'],
            mitigation=entry['mitigation'],
        ))
    return risks


class RiskAnalyzer(ABC):
    """Abstract base class for schedule risk analyzers."""

    def __init__(self, config: dict):
        """Initialize analyzer with configuration."""
        self.config = config
        self.risk_config = config.get('risk_analysis', {})
        self.max_risks = self.risk_config.get('max_risks', 3)

    def analyze_result(self, result: ScheduleResult, location: str = None, language: str = None) -> List[ScheduleRisk]:
        """Analyze the risks of a computed schedule."""
        request = RiskRequest.from_result(
            result,
            location=location or self.risk_config.get('location', 'Mumbai'),
            language=language or self.risk_config.get('language', 'en'),
        )
        return self.analyze(request)

    @abstractmethod
    def analyze(self, request: RiskRequest) -> List[ScheduleRisk]:
        """Return risk entries for the request."""
        pass

    @abstractmethod
    def get_analyzer_name(self) -> str:
        """Return the name of this analyzer."""
        pass
