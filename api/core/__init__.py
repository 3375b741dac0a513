"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB pool wiring and
environment settings). Item SQL lives in `items/`; the query/mutation engine
lives in `graph/`.
"""
