"""Error handling for the catalog.

- ErrorCode: classification for resolution failures and integrity findings
- CatalogError/CatalogException: structured error value and its raisable wrapper
- Result/Ok/Err: explicit success/failure values for page resolution
"""

from .errors import CatalogError, CatalogException, ErrorCode
from .result import Err, Ok, Result, collect_results, from_optional

__all__ = [
    "ErrorCode", "CatalogError", "CatalogException",
    "Result", "Ok", "Err", "from_optional", "collect_results",
]
