"""
security/ - Access Control
==========================
Decorators that guard the Telegram handlers.
"""
