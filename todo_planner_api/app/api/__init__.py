"""
API package containing versioned routes.

Each version lives in its own subpackage (currently only ``v1``) and
exposes a ``router`` that ``main.create_app`` mounts on the
application.
"""
