"""
Wordfolio client package.

Provides:
- client: async REST client and wire models for the Wordfolio API
- resolution: duplicate-entry and move-target resolution protocols
- cli: terminal host that renders resolution prompts
"""
