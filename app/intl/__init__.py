"""intl - translation resolution engine.

Resolves content for a locale and a dot-separated key path inside
structured translation dictionaries, with default-locale fallback,
single-flight dictionary loading, placeholder interpolation and
tagged-content dispatch.
"""
