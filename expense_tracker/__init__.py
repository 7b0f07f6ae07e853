"""Mini README: Core package initializer for the expense tracker.

The package keeps a personal expense ledger in a single JSON document. The
``ledger`` subpackage holds the models, persistence and business rules; this
module only re-exports the pieces the command line front end needs.
"""

from .logging_utils import get_logger

__version__ = "1.0.0"

__all__ = ["__version__", "get_logger"]
