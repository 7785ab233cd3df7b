"""
repositories/ - Data Access Layer
==================================
Repositories run the SQL from db.queries over an injected Database and turn
rows into domain models. They raise typed db.errors exceptions, never
presentation messages.
"""
