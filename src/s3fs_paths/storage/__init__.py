"""
Store boundary for S3 paths.

Holds the URI codec, the attribute record and the protocol implemented by
the store-access layer.
"""
