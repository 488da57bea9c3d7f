"""Interview domain services."""

from .due_window_evaluator import evaluate_due_buckets, hours_until, unreachable_buckets

__all__ = ["evaluate_due_buckets", "hours_until", "unreachable_buckets"]
