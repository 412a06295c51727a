"""
Language bundles, one module per language code.

en is the default language and defines every message key.
"""
