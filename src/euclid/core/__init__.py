"""
Core Package.

Contains the translation pipeline:
- Tokens and Tokenizer
- AST nodes and Parser (with the grammar validator)
- Function table and LaTeX Emitter
- Translation Engine and the mixed content processor
"""
