"""
Unit tests for preamble generation.
"""

import pytest

from promptkit.domain_core.services.preamble import (
    generate_concise_preamble,
    generate_preamble,
    model_instructions,
    normalize_model_id,
    tdd_instructions,
)
from promptkit.domain_core.value_objects import ProblemAnalysis, ProblemType


class TestTddInstructions:
    def test_coding_gets_tdd_cycle(self):
        analysis = ProblemAnalysis(type=ProblemType.CODING, complexity=5)
        instructions = tdd_instructions(analysis)

        assert "Test-Driven Development" in instructions
        assert "Red Phase" in instructions
        assert "failing tests" in instructions

    def test_writing_gets_content_validation(self):
        analysis = ProblemAnalysis(type=ProblemType.WRITING, complexity=5)
        instructions = tdd_instructions(analysis)

        assert "VALIDATION APPROACH" in instructions
        assert "Content Quality" in instructions

    def test_analysis_gets_verification(self):
        analysis = ProblemAnalysis(type=ProblemType.ANALYSIS, complexity=6)
        instructions = tdd_instructions(analysis)

        assert "VERIFICATION APPROACH" in instructions
        assert "Data Sources" in instructions

    def test_design_gets_design_validation(self):
        analysis = ProblemAnalysis(type=ProblemType.DESIGN, complexity=2)
        assert "DESIGN VALIDATION" in tdd_instructions(analysis)

    def test_high_complexity_adds_phased_delivery(self):
        low = tdd_instructions(ProblemAnalysis(type=ProblemType.CODING, complexity=6))
        high = tdd_instructions(ProblemAnalysis(type=ProblemType.CODING, complexity=7))

        assert "Phased Delivery" not in low
        assert "Phased Delivery" in high
        assert "Risk Assessment" in high
        assert high.startswith(low)


class TestModelInstructions:
    @pytest.mark.parametrize(
        "model_id, expected",
        [
            ("claude", "claude"),
            ("Claude 3.5 Sonnet", "claude"),
            ("gpt-4", "gpt-4"),
            ("GPT-4", "gpt-4"),
            ("gpt-4o-mini", "gpt-4"),
            ("gpt4", "gpt-4"),
            ("gemini-1.5-pro", "gemini"),
            ("llama-3", "generic"),
            ("", "generic"),
            (None, "generic"),
        ],
    )
    def test_normalize_model_id(self, model_id, expected):
        assert normalize_model_id(model_id) == expected

    def test_claude_instructions(self):
        instructions = model_instructions("claude")
        assert "CLAUDE-SPECIFIC OPTIMIZATION" in instructions
        assert "step-by-step" in instructions

    def test_gpt4_instructions(self):
        instructions = model_instructions("gpt-4")
        assert "GPT-4 SPECIFIC OPTIMIZATION" in instructions
        assert "structured outputs" in instructions

    def test_gemini_instructions(self):
        assert "GEMINI SPECIFIC OPTIMIZATION" in model_instructions("gemini")

    def test_unknown_model_gets_generic_instructions(self):
        instructions = model_instructions("unknown-model")
        assert "GENERAL AI OPTIMIZATION" in instructions
        assert "clear, specific instructions" in instructions


class TestGeneratePreamble:
    def test_contains_required_sections_and_prompt(self):
        prompt = "Create a React component for user authentication"
        preamble = generate_preamble(prompt, "claude")

        assert "CONTEXT" in preamble
        assert "REQUIREMENTS" in preamble
        assert prompt in preamble
        assert "TDD APPROACH" in preamble
        assert "CLAUDE-SPECIFIC OPTIMIZATION" in preamble
        assert "DELIVERABLES STRUCTURE" in preamble
        assert "FINAL VALIDATION CHECKLIST" in preamble

    def test_writing_task_for_gpt4(self):
        preamble = generate_preamble(
            "Write a technical blog post about microservices", "gpt-4"
        )
        assert "VALIDATION APPROACH" in preamble
        assert "GPT-4 SPECIFIC OPTIMIZATION" in preamble

    def test_defaults_to_generic_model(self):
        assert "GENERAL AI OPTIMIZATION" in generate_preamble("Build a calculator app")

    def test_includes_analysis_summary(self):
        preamble = generate_preamble("Create a Python API and design the UI")

        assert "You are an expert coding specialist" in preamble
        assert "- Type: coding" in preamble
        assert "- Key Focus Areas: create, api, python, design, ui" in preamble

    def test_no_keywords_falls_back_to_general_focus(self):
        preamble = generate_preamble("Plan my weekend trip")
        assert "- Key Focus Areas: general" in preamble
        assert "- Complexity Level: 1/10" in preamble

    def test_high_complexity_includes_phased_delivery(self, complex_prompt):
        preamble = generate_preamble(complex_prompt, "claude")
        assert "- Complexity Level: 10/10" in preamble
        assert "Phased Delivery" in preamble

    def test_is_deterministic(self, complex_prompt):
        assert generate_preamble(complex_prompt, "gemini") == generate_preamble(
            complex_prompt, "gemini"
        )

    def test_prompt_is_inserted_verbatim(self):
        prompt = 'Render {{ user }} & <b>"quotes"</b>'
        assert prompt in generate_preamble(prompt)

    def test_non_string_prompt(self):
        preamble = generate_preamble(None)
        assert '**Original Request**: ""' in preamble


class TestGenerateConcisePreamble:
    def test_simple_prompt_gets_short_template(self):
        preamble = generate_concise_preamble("Add two numbers")

        assert preamble.startswith("# SOLUTION REQUEST")
        assert "**Task**: Add two numbers" in preamble
        assert "- Ensure production readiness" in preamble
        assert "CONTEXT" not in preamble

    def test_complex_prompt_delegates_to_full_preamble(self, complex_prompt):
        assert generate_concise_preamble(complex_prompt, "claude") == (
            generate_preamble(complex_prompt, "claude")
        )

    def test_threshold_is_three(self):
        # 30 plain words -> complexity 3, 35 -> 4 (3.5 rounds up)
        at_threshold = " ".join(["word"] * 30)
        above_threshold = " ".join(["word"] * 35)

        assert generate_concise_preamble(at_threshold).startswith("# SOLUTION REQUEST")
        assert generate_concise_preamble(above_threshold).startswith(
            "# COMPREHENSIVE ONE-SHOT SOLUTION PREAMBLE"
        )

    def test_concise_is_shorter_than_complex_full_preamble(self, complex_prompt):
        concise = generate_concise_preamble("Add two numbers", "claude")
        full = generate_preamble(complex_prompt, "claude")
        assert len(concise) < len(full)
