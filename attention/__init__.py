"""Attention - keep the screen awake while an application needs it"""

__version__ = '0.1.0'
