"""
Unit tests for problem classification.
"""

import pytest
from pydantic import ValidationError

from promptkit.domain_core.services.classifier import analyze_problem_type
from promptkit.domain_core.value_objects import CATEGORY_ORDER, ProblemType


class TestProblemType:
    @pytest.mark.parametrize(
        "prompt",
        [
            "Create a React component",
            "Debug this JavaScript function",
            "Build a REST API",
            "Write a Python script for data processing",
        ],
    )
    def test_identifies_coding_problems(self, prompt):
        assert analyze_problem_type(prompt).type is ProblemType.CODING

    @pytest.mark.parametrize(
        "prompt",
        [
            "Write a blog post about AI",
            "Create marketing copy for a product",
            "Draft a technical documentation",
            "Compose an email to stakeholders",
        ],
    )
    def test_identifies_writing_problems(self, prompt):
        assert analyze_problem_type(prompt).type is ProblemType.WRITING

    @pytest.mark.parametrize(
        "prompt",
        [
            "Analyze market trends",
            "Compare different solutions",
            "Research best practices",
            "Evaluate performance metrics",
        ],
    )
    def test_identifies_analysis_problems(self, prompt):
        assert analyze_problem_type(prompt).type is ProblemType.ANALYSIS

    def test_identifies_design_problems(self):
        result = analyze_problem_type("Create a wireframe mockup for the landing page")
        assert result.type is ProblemType.DESIGN

    def test_ties_go_to_first_declared_category(self):
        # coding ("api") and design ("design") both score 1
        result = analyze_problem_type("Design an api")
        assert result.scores["coding"] == result.scores["design"] == 1
        assert result.type is ProblemType.CODING

    def test_shared_keyword_counts_in_every_category(self):
        result = analyze_problem_type("review")
        assert result.scores == {"coding": 0, "writing": 1, "analysis": 1, "design": 0}
        assert result.keywords == ["review", "review"]
        assert result.type is ProblemType.WRITING

    def test_category_order(self):
        assert [c.value for c in CATEGORY_ORDER] == [
            "coding",
            "writing",
            "analysis",
            "design",
        ]


class TestKeywords:
    def test_keywords_follow_declaration_order(self):
        result = analyze_problem_type("Create a Python API and design the UI")
        assert result.keywords == ["create", "api", "python", "design", "ui"]

    def test_keyword_counted_once_per_category(self):
        result = analyze_problem_type("debug debug debug")
        assert result.scores["coding"] == 1


class TestComplexity:
    def test_simple_prompt_has_minimum_complexity(self):
        assert analyze_problem_type("Write hello world").complexity == 1

    def test_complex_prompt_scores_higher(self):
        simple = analyze_problem_type("Write hello world")
        complex_ = analyze_problem_type(
            "Build a full-stack e-commerce application with user authentication, "
            "payment processing, inventory management, and real-time notifications"
        )
        # 15 words (1.5) + "full" (2) + "and" (0.5)
        assert complex_.complexity == 4
        assert complex_.complexity > simple.complexity

    def test_complexity_is_capped_at_ten(self, complex_prompt):
        assert analyze_problem_type(complex_prompt).complexity == 10

    def test_rounds_half_up(self):
        # 25 plain words -> 2.5
        assert analyze_problem_type(" ".join(["word"] * 25)).complexity == 3

    def test_word_count_contribution_is_capped(self):
        assert analyze_problem_type(" ".join(["word"] * 200)).complexity == 5

    @pytest.mark.parametrize(
        "prompt",
        [
            "",
            " ",
            "and and and and and and and and and and and and and and and and and and and and",
            "security " * 30,
            "x",
        ],
    )
    def test_complexity_is_integer_in_range(self, prompt):
        complexity = analyze_problem_type(prompt).complexity
        assert isinstance(complexity, int)
        assert 1 <= complexity <= 10


class TestInvalidInput:
    @pytest.mark.parametrize("value", ["", None, 123])
    def test_neutral_analysis(self, value):
        result = analyze_problem_type(value)
        assert result.type is ProblemType.CODING
        assert result.complexity == 1
        assert result.keywords == []
        assert set(result.scores.values()) == {0}

    def test_analysis_is_immutable(self):
        result = analyze_problem_type("Build a REST API")
        with pytest.raises(ValidationError):
            result.complexity = 5
