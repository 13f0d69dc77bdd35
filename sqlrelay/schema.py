# sqlrelay/schema.py

# Sample e-commerce database the model is told to target.
TABLES: dict[str, list[str]] = {
    "customers": ["id", "name", "email", "country", "created_at"],
    "products": ["id", "name", "category", "price", "stock_quantity"],
    "orders": ["id", "customer_id", "order_date", "total_amount", "status"],
    "order_items": ["id", "order_id", "product_id", "quantity", "unit_price"],
}

def get_schema_summary() -> str:
    """
    Returns the schema as prompt text, one table per line:
      "**customers** (id, name, email, country, created_at)"
    """
    parts = []
    for t, cols in TABLES.items():
        parts.append(f"**{t}** (" + ", ".join(cols) + ")")
    return "\n".join(parts)
