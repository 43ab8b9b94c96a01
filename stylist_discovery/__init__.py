"""
Stylist discovery engine.

Responsibilities:
- Filter and rank an already-fetched list of stylist candidates.
- Place candidates on a padded 2-D map canvas, robust to coincident coordinates.
- Track the single highlighted candidate of a map widget.
"""
