"""
store package
-------------
Read-only document store for the site's content.
"""
from folio.store.manager import DocumentStore

__all__ = ["DocumentStore"]
