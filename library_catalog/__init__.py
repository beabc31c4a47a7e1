"""Library Catalog - Core Application Package

This package contains the core application modules including:
- Catalog management logic (library.py)
- Data model (book.py)
- Settings (config.py)
- Input validation (validators.py)
- Output rendering (ui_helpers.py)
- CLI interface (main.py)
"""
