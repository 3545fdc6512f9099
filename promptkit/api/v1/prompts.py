"""
FastAPI router for the prompt pipeline.
"""

from fastapi import APIRouter, Depends

from promptkit.api.dependencies import get_prompt_pipeline_service
from promptkit.api.schemas import (
    AtomizeResponse,
    OptimizeResponse,
    PreambleRequest,
    PreambleResponse,
    ProcessRequest,
    ProcessResponse,
    PromptRequest,
    TokenRequest,
    TokenResponse,
)
from promptkit.application.services.prompt_pipeline import PromptPipelineService
from promptkit.domain_core.value_objects import ModelRecommendation, ProblemAnalysis

router = APIRouter(tags=["prompts"])


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize_prompt(
    request: PromptRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    """Strip filler and verbose constructions from a prompt."""
    optimized, metrics = service.optimize(request.prompt)
    return OptimizeResponse(optimized=optimized, metrics=metrics)


@router.post("/atomize", response_model=AtomizeResponse)
async def atomize_prompt(
    request: PromptRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    """Split a prompt into numbered steps."""
    return AtomizeResponse(atomized=service.atomize(request.prompt))


@router.post("/analyze", response_model=ProblemAnalysis)
async def analyze_prompt(
    request: PromptRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    return service.analyze(request.prompt)


@router.post("/recommend", response_model=ModelRecommendation)
async def recommend_model(
    request: PromptRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    return service.recommend(request.prompt)


@router.post("/preamble", response_model=PreambleResponse)
async def generate_preamble(
    request: PreambleRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    """Generate an instructional preamble for an assistant model."""
    preamble, model = service.preamble(
        request.prompt, model=request.model, concise=request.concise
    )
    _, approximate_tokens = service.estimate(preamble)
    return PreambleResponse(
        preamble=preamble, model=model, estimated_tokens=approximate_tokens
    )


@router.post("/tokens", response_model=TokenResponse)
async def estimate_tokens(
    request: TokenRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    tokens, approximate_tokens = service.estimate(request.text)
    return TokenResponse(tokens=tokens, approximate_tokens=approximate_tokens)


@router.post("/process", response_model=ProcessResponse)
async def process_prompt(
    request: ProcessRequest,
    service: PromptPipelineService = Depends(get_prompt_pipeline_service),
):
    """Run the whole pipeline on a prompt in one call."""
    return ProcessResponse(**service.process(request.prompt, model=request.model))
