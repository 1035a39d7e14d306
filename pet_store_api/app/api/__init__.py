"""
API package containing routers.

``router.include_routers`` mounts every endpoint module on the
application.
"""
