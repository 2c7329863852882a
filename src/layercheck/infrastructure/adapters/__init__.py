"""Infrastructure adapters implementing domain ports."""

from layercheck.infrastructure.adapters.ast_parser import ASTSourceParser

__all__ = ["ASTSourceParser"]
