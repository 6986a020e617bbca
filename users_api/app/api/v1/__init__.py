"""
Version 1 of the API.

Breaking changes to the user resource should go into a new version
subpackage (e.g. ``v2``) rather than here.
"""
