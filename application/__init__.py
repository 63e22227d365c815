"""
Application Layer for the program editor.

This package contains:
- ports/: Abstract collaborator interfaces (what the editor needs)
- use_cases/: Async workflows that cross the collaborator boundary
- editor_session.py: The single-actor session owning the current document
- exceptions.py: Boundary error types
"""
