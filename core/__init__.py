"""Core processing modules package.

This package contains the Casebinder components:
- analysis: heuristic document analysis and comparison
- generation: template-based document generation and export
- cases: in-memory case registry
- files: folders, uploads and text extraction
- manager: facade composing all of the above
"""
