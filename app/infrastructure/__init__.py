"""Infrastructure modules for fish-i18n.

Components:
- i18n: Message translation (Translator, catalogs, locale resolution)
"""
