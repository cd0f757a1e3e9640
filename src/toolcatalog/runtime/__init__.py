"""Runtime - batch generation and observability.

Import from the subpackages directly:
    toolcatalog.runtime.batch          (locale x tool page generation)
    toolcatalog.runtime.observability  (structured logging)
"""
