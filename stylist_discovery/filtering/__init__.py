"""
Filter engine.

Responsibilities:
- Validate a FilterSpec built from the search form.
- Keep only the candidates matching every active predicate.
- Order survivors deterministically by the requested sort key.
"""
