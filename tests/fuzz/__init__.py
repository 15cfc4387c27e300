"""Fuzz testing infrastructure for funcgraph.

This package contains:
- shadow_graph: Walk-based reference model for differential testing
- test_graph_oracle: State machine fuzzer using RuleBasedStateMachine

Python 3.13+.
"""
