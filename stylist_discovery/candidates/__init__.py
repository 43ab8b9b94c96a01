"""
Candidate data model.

Responsibilities:
- Define the immutable Candidate snapshot supplied by the data-fetch layer.
- Derive distances and travel estimates from a reference coordinate.
"""
