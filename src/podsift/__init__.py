"""
Podsift - podcast transcript analysis with multi-provider LLM fallback.
"""

__version__ = "0.1.0"
