# sqlrelay/prompt.py
from .schema import get_schema_summary

RULES = (
    "Rules:\n"
    "- Generate ONLY the SQL query, no explanations\n"
    "- Use proper SQL syntax (PostgreSQL)\n"
    "- Include relevant JOINs when needed\n"
    "- Use appropriate WHERE clauses for filtering\n"
    "- Add ORDER BY and LIMIT when sensible\n"
    "- Return well-formatted, readable SQL with proper indentation\n"
    "- Always use table aliases for clarity"
)

def build_system_prompt(schema_text: str | None = None) -> str:
    """
    Compose the fixed instruction text sent ahead of every question.
    schema_text defaults to the sample e-commerce schema.
    """
    if schema_text is None:
        schema_text = get_schema_summary()
    parts = [
        "You are an expert SQL query generator. Convert natural language questions into valid SQL queries.",
        "",
        "Context: You're working with a sample e-commerce database with these tables:",
        "",
        schema_text,
        "",
        RULES,
    ]
    return "\n".join(parts)

SYSTEM_PROMPT = build_system_prompt()

def build_messages(user_question: str) -> list[dict[str, str]]:
    # system prompt + the question as the only user turn
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_question},
    ]
