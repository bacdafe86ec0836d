"""
Integration Tests Package

End-to-end checks of the builder, event log, capture and page renderer.

TEST AXIOMS:
=============
1. Determinism: same builder state = byte-identical output
2. Atomic failure: render either fully succeeds or raises
3. Index alignment: notation line N <-> transcript entry N <-> event N
"""
