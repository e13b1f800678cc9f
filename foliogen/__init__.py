"""
Static portfolio generator.
Renders the one-page portfolio (HTML, CSS, JS) from the tab and project registries.
"""

__version__ = "0.1.0"
