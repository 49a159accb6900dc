"""Fixed-width plaintext filters for Jinja2 templates."""

from plaintext_filters.lib.align import Alignment, align_text, slice_end
from plaintext_filters.lib.errors import FilterError, InvalidArgument, TypeMismatch
from plaintext_filters.lib.jinja import create_environment, install_filters

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "FilterError",
    "InvalidArgument",
    "TypeMismatch",
    "__version__",
    "align_text",
    "create_environment",
    "install_filters",
    "slice_end",
]
