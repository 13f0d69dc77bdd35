# sqlrelay/examples.py

# Offered on the form as one-click starting questions.
EXAMPLE_QUERIES = [
    "Show all customers from USA",
    "Find total sales for each product category",
    "List top 5 customers by order value",
    "Show products with low stock (less than 10)",
    "Get orders placed in the last 30 days",
]
