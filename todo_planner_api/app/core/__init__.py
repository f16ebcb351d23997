"""
Core infrastructure: configuration, logging, errors, storage and the
request guards shared by all endpoints.
"""
