"""
Keyword Responder

Provides:
- Response table (keywords) — trigger word → canned response
- Default responses (defaults) — random fallback paragraphs
- Responder (responder) — facade answering a set of input words
"""

from .config import ResponderConfig, load_config
from .defaults import FALLBACK_RESPONSE, DefaultsParseResult
from .responder import Responder, ResponseDecision

__all__ = [
    'ResponderConfig', 'load_config',
    'FALLBACK_RESPONSE', 'DefaultsParseResult',
    'Responder', 'ResponseDecision',
]
