"""
Photo Feed Browser - search a public photo feed as you type.
"""
__version__ = "0.1.0"
