"""
wk-status: WaniKani review status for the menu bar.
"""

__version__ = "1.0.0"
