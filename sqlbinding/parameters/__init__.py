"""Named placeholder rewriting for positional-parameter execution APIs."""

from sqlbinding.parameters.converter import POSITIONAL_PLACEHOLDER, positional_run, rewrite
from sqlbinding.parameters.extractor import PLACEHOLDER_REGEX, extract_placeholders, has_placeholders
from sqlbinding.parameters.types import PlaceholderInfo, PlaceholderStyle, RewriteResult

__all__ = (
    "PLACEHOLDER_REGEX",
    "POSITIONAL_PLACEHOLDER",
    "PlaceholderInfo",
    "PlaceholderStyle",
    "RewriteResult",
    "extract_placeholders",
    "has_placeholders",
    "positional_run",
    "rewrite",
)
