"""
LLM package
"""

from .client import LLMClient, LLMError, get_llm_client, set_llm_client, parse_json_object

__all__ = [
    "LLMClient",
    "LLMError",
    "get_llm_client",
    "set_llm_client",
    "parse_json_object",
]
