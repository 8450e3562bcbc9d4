"""Tests for the cost calculator."""

from __future__ import annotations

import pytest

from resume_builder.logging.cost_calculator import MODEL_PRICING, calculate_cost


class TestCostCalculator:
    def test_gpt_4o_mini_cost(self):
        # 1M input + 1M output: $0.15 + $0.60 = $0.75
        cost = calculate_cost([("gpt-4o-mini", 1_000_000, 1_000_000)])
        assert cost == pytest.approx(0.75)

    def test_haiku_cost(self):
        cost = calculate_cost([("claude-haiku-4-5-20251001", 1_000_000, 1_000_000)])
        assert cost == pytest.approx(4.80)

    def test_typical_improvement_call(self):
        # 300 input + 120 output for gpt-4o-mini
        cost = calculate_cost([("gpt-4o-mini", 300, 120)])
        expected = (300 / 1_000_000) * 0.15 + (120 / 1_000_000) * 0.60
        assert cost == pytest.approx(expected)

    def test_multiple_calls(self):
        calls = [
            ("gpt-4o-mini", 1000, 500),
            ("gpt-4o", 2000, 1000),
        ]
        expected = (
            (1000 / 1e6) * 0.15 + (500 / 1e6) * 0.60
            + (2000 / 1e6) * 2.50 + (1000 / 1e6) * 10.00
        )
        assert calculate_cost(calls) == pytest.approx(expected)

    def test_unknown_model_is_free(self):
        assert calculate_cost([("some-local-model", 1_000_000, 1_000_000)]) == 0.0

    def test_empty_calls(self):
        assert calculate_cost([]) == 0.0

    def test_pricing_table_has_default_model(self):
        assert "gpt-4o-mini" in MODEL_PRICING
