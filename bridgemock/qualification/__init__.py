"""Query placeholder substitution."""

from .parser import QualificationParser, substitute

__all__ = ["QualificationParser", "substitute"]
