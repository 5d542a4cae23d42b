# CLI package for Impossible Programs
"""
Command-line interface for the search engine.

Commands:
    impossible demo      — Run the example equalities and moduli
    impossible equal     — Compare two example functions
    impossible modulus   — Compute the modulus of an example function
    impossible evaluate  — Evaluate an example function on a bit string
"""
