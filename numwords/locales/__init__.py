"""
Per-language vocabularies.

Every module exposes ``build(options) -> CardinalConverter``, combining its
tables with one of the engines in ``numwords.engines``.
"""
