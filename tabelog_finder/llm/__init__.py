"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build search prompts from a free-text location or a coordinate pair.
- Call Groq with a strict JSON schema and validate the restaurant payload.
- Ask Groq which country a coordinate pair falls in.
"""
