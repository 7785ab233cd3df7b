"""
services/ - Business Layer
==========================
The partner operations and the notices they report back to the user.
"""
