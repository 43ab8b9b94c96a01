"""
Placement engine.

Responsibilities:
- Project candidate coordinates onto a padded 2-D map canvas.
- Spread coincident or unusable coordinates over a fixed fallback sequence.
- Track the highlighted candidate of a map widget.
"""
