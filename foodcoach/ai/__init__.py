"""AI provider layer.

Modules:
- providers: credential-based provider selection, client context, adapter base
- openai_provider / anthropic_provider / gemini_provider: the three backends
- json_utils, normalize: coercing model output into domain records
- service: the public operations
"""
__all__ = ["providers", "service", "json_utils", "normalize", "errors", "schemas"]
