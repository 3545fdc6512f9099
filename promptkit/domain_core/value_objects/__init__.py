from .model_recommendation import ModelRecommendation
from .optimization_metrics import OptimizationMetrics
from .problem_type import CATEGORY_ORDER, ProblemAnalysis, ProblemType

__all__ = [
    "CATEGORY_ORDER",
    "ModelRecommendation",
    "OptimizationMetrics",
    "ProblemAnalysis",
    "ProblemType",
]
