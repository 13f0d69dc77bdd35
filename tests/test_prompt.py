"""
Tests for the fixed system prompt and message building.
"""

from sqlrelay.prompt import SYSTEM_PROMPT, build_messages, build_system_prompt
from sqlrelay.schema import TABLES, get_schema_summary


class TestSchema:
    """The sample e-commerce schema."""

    def test_four_tables(self) -> None:
        assert list(TABLES) == ["customers", "products", "orders", "order_items"]

    def test_summary_lists_columns(self) -> None:
        summary = get_schema_summary()
        assert "**customers** (id, name, email, country, created_at)" in summary
        assert "**order_items** (id, order_id, product_id, quantity, unit_price)" in summary
        assert len(summary.splitlines()) == 4


class TestSystemPrompt:
    """Prompt text sent ahead of every question."""

    def test_contains_schema_and_rules(self) -> None:
        assert get_schema_summary() in SYSTEM_PROMPT
        assert "Generate ONLY the SQL query" in SYSTEM_PROMPT
        assert "PostgreSQL" in SYSTEM_PROMPT

    def test_custom_schema_text(self) -> None:
        prompt = build_system_prompt("**widgets** (id, label)")
        assert "**widgets** (id, label)" in prompt
        assert "customers" not in prompt


def test_messages_are_system_then_user() -> None:
    messages = build_messages("How many orders shipped?")
    assert messages == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "How many orders shipped?"},
    ]
