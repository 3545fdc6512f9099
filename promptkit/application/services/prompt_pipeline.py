"""
Prompt Pipeline Service - Runs the text-transformation pipeline for a request.

Optimize → Analyze → Atomize → Preamble, plus the token and quality
measurements shown alongside the results.
"""

from typing import List, Optional, Tuple

from promptkit.domain_core.services import (
    analyze_problem_type,
    atomize_problem,
    estimate_tokens,
    estimate_tokens_by_length,
    generate_concise_preamble,
    generate_preamble,
    optimization_metrics,
    optimize,
    quality_score,
    recommend_model,
)
from promptkit.domain_core.validators.prompt_validators import PromptValidators
from promptkit.domain_core.value_objects import (
    ModelRecommendation,
    OptimizationMetrics,
    ProblemAnalysis,
)
from promptkit.infra.config.logging_config import get_logger


class PromptPipelineService:
    """
    Application service wrapping the pure pipeline stages.

    Validates prompts at the boundary, resolves the target model and logs one
    event per operation. Prompt text itself is never logged.
    """

    def __init__(self, max_prompt_length: int, default_model: Optional[str] = None):
        self.max_prompt_length = max_prompt_length
        self.default_model = default_model
        self._log = get_logger("application.prompt_pipeline")

    def validate(self, prompt: str) -> None:
        PromptValidators.validate_prompt(prompt, self.max_prompt_length)

    def optimize(self, prompt: str) -> Tuple[str, OptimizationMetrics]:
        self.validate(prompt)
        optimized = optimize(prompt)
        metrics = optimization_metrics(prompt, optimized)
        self._log.info(
            "prompt.optimized",
            original_length=len(prompt),
            optimized_length=len(optimized),
            tokens_saved=metrics.tokens_saved,
        )
        return optimized, metrics

    def atomize(self, prompt: str) -> List[str]:
        self.validate(prompt)
        steps = atomize_problem(prompt)
        self._log.info("prompt.atomized", step_count=len(steps))
        return steps

    def analyze(self, prompt: str) -> ProblemAnalysis:
        self.validate(prompt)
        analysis = analyze_problem_type(prompt)
        self._log.info(
            "prompt.analyzed",
            problem_type=analysis.type.value,
            complexity=analysis.complexity,
            keyword_count=len(analysis.keywords),
        )
        return analysis

    def recommend(self, prompt: str) -> ModelRecommendation:
        self.validate(prompt)
        recommendation = recommend_model(prompt)
        self._log.info("prompt.recommended", primary=recommendation.primary)
        return recommendation

    def resolve_model(self, prompt: str, model: Optional[str]) -> str:
        """Requested model, else the configured default, else the recommendation."""
        if model and model.strip():
            return model.strip()
        if self.default_model:
            return self.default_model
        return recommend_model(prompt).primary

    def preamble(
        self, prompt: str, model: Optional[str] = None, concise: bool = False
    ) -> Tuple[str, str]:
        """Return the preamble and the model it was generated for."""
        self.validate(prompt)
        target_model = self.resolve_model(prompt, model)

        if concise:
            text = generate_concise_preamble(prompt, target_model)
        else:
            text = generate_preamble(prompt, target_model)

        self._log.info(
            "prompt.preamble_generated",
            model=target_model,
            concise=concise,
            preamble_length=len(text),
        )
        return text, target_model

    def estimate(self, text: str) -> Tuple[int, int]:
        """Detailed and length-based token estimates for ``text``."""
        return estimate_tokens(text), estimate_tokens_by_length(text)

    def process(self, prompt: str, model: Optional[str] = None) -> dict:
        """Run every stage on ``prompt`` and collect the results."""
        self.validate(prompt)

        optimized = optimize(prompt)
        steps = atomize_problem(prompt)
        analysis = analyze_problem_type(prompt)
        recommendation = recommend_model(prompt)
        target_model = self.resolve_model(prompt, model)
        preamble = generate_preamble(prompt, target_model)
        score = quality_score(prompt, optimized, steps)

        self._log.info(
            "prompt.processed",
            problem_type=analysis.type.value,
            complexity=analysis.complexity,
            step_count=len(steps),
            quality_score=score,
            model=target_model,
        )

        return {
            "original": prompt,
            "optimized": optimized,
            "atomized": steps,
            "analysis": analysis,
            "recommendation": recommendation,
            "metrics": optimization_metrics(prompt, optimized),
            "quality_score": score,
            "preamble": {
                "preamble": preamble,
                "model": target_model,
                "estimated_tokens": estimate_tokens_by_length(preamble),
            },
        }
