"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every domain router from
``endpoints``; the application mounts it under ``settings.api_prefix``.
"""
