"""
phraselint - structural linter for i18n JSON locale bundles.
"""
__version__ = "0.1.0"
