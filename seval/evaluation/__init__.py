"""Evaluation: the tree-walking evaluator, special forms, application and the primitive registry."""
