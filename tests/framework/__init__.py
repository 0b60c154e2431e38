"""
Test framework for editorial workflow scenarios.
"""

from .dsl import WorkflowDsl, WorkflowSnapshot

__all__ = [
    'WorkflowDsl',
    'WorkflowSnapshot',
]
