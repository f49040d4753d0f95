"""
Restaurant search orchestration.

Responsibilities:
- Hold the per-session search state and its transitions.
- Drive the Groq query service for restaurant searches and country checks.
- Apply the tiered rating policy to the returned candidates.
- Expose the paginated slice of results to the display layer.
"""
