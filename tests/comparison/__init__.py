"""
End-to-end comparison tests: objects in, side-by-side text lines out.
"""
