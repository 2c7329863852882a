"""Infrastructure layer: AST parsing and logging setup."""
