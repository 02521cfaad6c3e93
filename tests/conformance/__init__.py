"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the simulator.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_corridor_structure.py - Every sequence is well formed and validated at load
2. test_determinism.py - Identical inputs give identical simulations
3. test_conservation.py - Money only changes at fees and conversions
4. test_playback_properties.py - Cursor monotonicity, reset, stale timers

These tests use hypothesis for property-based testing.
"""
