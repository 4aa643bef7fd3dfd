"""LLM integration layer.

Kept small on purpose:
- No prompt/output logging.
- Configurable via environment variables.
- Treated as a stateless function by callers.
"""
