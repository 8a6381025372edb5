"""External API clients.

Submodules:
    client -- Freesound APIv2 client (text search, advanced search, download)
"""
