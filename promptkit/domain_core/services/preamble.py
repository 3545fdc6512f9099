"""
Preamble generation for one-shot assistant requests.

The document skeletons live in ``promptkit/templates`` as Jinja2 templates;
the type and model specific sections are kept here as constants.
"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from promptkit.domain_core.services.classifier import analyze_problem_type
from promptkit.domain_core.value_objects.problem_type import (
    ProblemAnalysis,
    ProblemType,
)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

# Prompts at or below this complexity get the concise template.
CONCISE_COMPLEXITY_THRESHOLD = 3
# Prompts at or above this complexity get phased delivery guidance.
HIGH_COMPLEXITY_THRESHOLD = 7
MAX_FOCUS_AREAS = 5

GENERIC_MODEL = "generic"

_jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=False,
    undefined=StrictUndefined,
)


class PreambleSections:
    """Type and model specific preamble sections."""

    VALIDATION = {
        ProblemType.CODING: """## TDD APPROACH (Test-Driven Development):
1. **Red Phase**: Write failing tests first that define the expected behavior
2. **Green Phase**: Write minimal code to make tests pass
3. **Refactor Phase**: Improve code quality while keeping tests green
4. **Test Coverage**: Ensure comprehensive test coverage (unit, integration, e2e)
5. **Documentation**: Include inline documentation and usage examples""",
        ProblemType.WRITING: """## VALIDATION APPROACH:
1. **Structure Check**: Verify logical flow and organization
2. **Content Quality**: Ensure accuracy, clarity, and completeness
3. **Audience Alignment**: Confirm content meets target audience needs
4. **Style Consistency**: Maintain consistent tone and formatting
5. **Fact Verification**: Cross-check all claims and statistics""",
        ProblemType.ANALYSIS: """## VERIFICATION APPROACH:
1. **Data Sources**: Cite credible and current sources
2. **Methodology**: Use systematic analysis frameworks
3. **Bias Check**: Identify and mitigate potential biases
4. **Peer Review**: Structure for expert validation
5. **Actionable Insights**: Provide clear, implementable recommendations""",
        ProblemType.DESIGN: """## DESIGN VALIDATION:
1. **User Testing**: Plan for usability testing and feedback
2. **Accessibility**: Ensure WCAG compliance and inclusive design
3. **Responsive Design**: Test across devices and screen sizes
4. **Brand Consistency**: Align with brand guidelines and standards
5. **Performance**: Consider loading times and optimization""",
    }

    HIGH_COMPLEXITY = """
6. **Phased Delivery**: Break into manageable phases with clear milestones
7. **Risk Assessment**: Identify potential challenges and mitigation strategies
8. **Scalability Planning**: Design for future growth and changes"""

    MODELS = {
        "claude": """## CLAUDE-SPECIFIC OPTIMIZATION:
- Leverage Claude's strength in step-by-step reasoning and analysis
- Use clear, structured prompts with explicit role definitions
- Request detailed explanations and thought processes
- Utilize Claude's excellent code review and debugging capabilities
- Ask for multiple approaches and trade-off analysis""",
        "gpt-4": """## GPT-4 SPECIFIC OPTIMIZATION:
- Structure requests with clear formatting and examples
- Use system messages for role and context setting
- Leverage GPT-4's creative problem-solving abilities
- Request structured outputs (JSON, markdown, tables)
- Utilize its strong plugin and tool integration capabilities""",
        "gemini": """## GEMINI SPECIFIC OPTIMIZATION:
- Leverage multimodal capabilities when applicable
- Use clear, conversational prompting style
- Request factual verification and source attribution
- Utilize its strong reasoning for complex problems
- Ask for real-time information when relevant""",
        GENERIC_MODEL: """## GENERAL AI OPTIMIZATION:
- Use clear, specific instructions with examples
- Break complex tasks into smaller components
- Provide context and constraints explicitly
- Request validation and error checking
- Ask for alternative approaches and recommendations""",
    }


def normalize_model_id(model_id: Optional[str]) -> str:
    """Map a free-form model name onto a known model family.

    >>> normalize_model_id("Claude 3.5 Sonnet")
    'claude'
    >>> normalize_model_id("gpt-4o-mini")
    'gpt-4'
    """
    if not isinstance(model_id, str):
        return GENERIC_MODEL

    lowered = model_id.strip().lower()
    if "claude" in lowered:
        return "claude"
    if "gpt-4" in lowered or "gpt4" in lowered:
        return "gpt-4"
    if "gemini" in lowered:
        return "gemini"
    return GENERIC_MODEL


def tdd_instructions(analysis: ProblemAnalysis) -> str:
    instructions = PreambleSections.VALIDATION[analysis.type]
    if analysis.complexity >= HIGH_COMPLEXITY_THRESHOLD:
        instructions += PreambleSections.HIGH_COMPLEXITY
    return instructions


def model_instructions(model_id: Optional[str]) -> str:
    return PreambleSections.MODELS[normalize_model_id(model_id)]


def _prompt_text(text: Any) -> str:
    return text if isinstance(text, str) else ""


def generate_preamble(text: Any, model_id: Optional[str] = None) -> str:
    """Build the full one-shot preamble for ``text``.

    The output only depends on the arguments, so repeated calls produce
    identical documents.
    """
    prompt = _prompt_text(text)
    analysis = analyze_problem_type(prompt)
    focus_areas = ", ".join(analysis.keywords[:MAX_FOCUS_AREAS]) or "general"

    return _jinja_env.get_template("preamble.md.j2").render(
        prompt=prompt,
        analysis=analysis,
        focus_areas=focus_areas,
        validation_block=tdd_instructions(analysis),
        model_block=model_instructions(model_id),
    )


def generate_concise_preamble(text: Any, model_id: Optional[str] = None) -> str:
    """Short request for simple prompts, full preamble otherwise."""
    prompt = _prompt_text(text)
    analysis = analyze_problem_type(prompt)

    if analysis.complexity <= CONCISE_COMPLEXITY_THRESHOLD:
        return _jinja_env.get_template("concise_preamble.md.j2").render(prompt=prompt)
    return generate_preamble(prompt, model_id)
