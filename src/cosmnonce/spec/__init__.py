"""
Spec - Typed records exchanged with the chain query layer.

Account query bodies are validated against the JSON Schemas bundled
under ``docs/schemas/v1`` before any counter is read from them.
"""
