"""
Discovery service.

Responsibilities:
- Accept a caller-supplied candidate list, filter spec and canvas options.
- Run the filter engine, then place the ranked survivors on the map canvas.
- Return plain, serialisable results and record a usage event.
"""
