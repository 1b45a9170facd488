from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
@dataclass(frozen=True)
class ResponseRecord:
    stimulus: str; text: str = ""
    elapsed_seconds: Optional[float] = None
@dataclass(frozen=True)
class Indicators:
    positive: int = 0
    negative: int = 0
    action: int = 0
    length: int = 0
    def to_dict(self) -> Dict[str, int]:
        return {"positive": self.positive, "negative": self.negative,
                "action": self.action, "length": self.length}
@dataclass(frozen=True)
class ResponseAnalysis:
    word: str
    response: str
    score: int
    flags: List[str] = field(default_factory=list)
    indicators: Indicators = field(default_factory=Indicators)
    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "response": self.response,
            "score": self.score,
            "flags": list(self.flags),
            "indicators": self.indicators.to_dict(),
        }
@dataclass
class Patterns:
    positive_indicators: int = 0
    negative_indicators: int = 0
    action_words: int = 0
    flags: Dict[str, int] = field(default_factory=dict)
    def to_dict(self) -> Dict[str, Any]:
        return {
            "positiveIndicators": self.positive_indicators,
            "negativeIndicators": self.negative_indicators,
            "actionWords": self.action_words,
            "flags": dict(self.flags),
        }
@dataclass
class TestAnalysis:
    overall_score: int
    completion_rate: int
    time_efficiency: int
    total_responses: int
    total_words: int
    feedback: str
    strengths: List[str] = field(default_factory=list)
    areas_for_improvement: List[str] = field(default_factory=list)
    detailed_analysis: List[ResponseAnalysis] = field(default_factory=list)
    patterns: Patterns = field(default_factory=Patterns)

    __test__ = False  # not a pytest class

    @property
    def average_score(self) -> int:
        return self.overall_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "averageScore": self.average_score,
            "completionRate": self.completion_rate,
            "totalResponses": self.total_responses,
            "totalWords": self.total_words,
            "timeEfficiency": self.time_efficiency,
            "feedback": self.feedback,
            "strengths": list(self.strengths),
            "areasForImprovement": list(self.areas_for_improvement),
            "detailedAnalysis": [a.to_dict() for a in self.detailed_analysis],
            "patterns": self.patterns.to_dict(),
        }
@dataclass
class OirQuestionResult:
    question_id: int
    user_answer: Any
    correct_answer: Any
    is_correct: bool
    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_id": self.question_id,
            "user_answer": self.user_answer,
            "correct_answer": self.correct_answer,
            "is_correct": self.is_correct,
        }
@dataclass
class OirEvaluation:
    test_id: str
    score: int
    correct_answers: int
    total_questions: int
    attempted_questions: int
    verbal_score: int
    non_verbal_score: int
    percentile: int
    performance_level: str
    time_taken: float = 0
    results: List[OirQuestionResult] = field(default_factory=list)
    evaluated_at: str = ""
    @property
    def unattempted_questions(self) -> int:
        return self.total_questions - self.attempted_questions
    def to_dict(self) -> Dict[str, Any]:
        return {
            "test_id": self.test_id,
            "score": self.score,
            "correct_answers": self.correct_answers,
            "total_questions": self.total_questions,
            "attempted_questions": self.attempted_questions,
            "unattempted_questions": self.unattempted_questions,
            "verbal_score": self.verbal_score,
            "non_verbal_score": self.non_verbal_score,
            "percentile": self.percentile,
            "performance_level": self.performance_level,
            "time_taken": self.time_taken,
            "results": [r.to_dict() for r in self.results],
            "evaluated_at": self.evaluated_at,
        }
