"""
pageorder - Validate print updates against page ordering rules.

An ordering rule ``X|Y`` says page X must be printed before page Y
whenever an update contains both.  An update is correctly ordered when
every rule that applies to it holds.  The headline result is the sum of
the middle page of every correctly-ordered update.

Example usage:
    from pageorder import ConstraintStore, sum_middle_of_compliant
    from pageorder.parser import load_puzzle

    puzzle = load_puzzle(Path("input.txt"))
    store = ConstraintStore.build(puzzle.rules)
    print(sum_middle_of_compliant(puzzle.updates, store))
"""

__version__ = "0.1.0"
__all__ = [
    "ConstraintStore",
    "OrderingRule",
    "is_compliant",
    "sum_middle_of_compliant",
    "PreconditionViolation",
    "__version__",
]


# Lazy imports to avoid loading pydantic and OTel at import time
def __getattr__(name: str):
    if name == "ConstraintStore":
        from pageorder.rules.store import ConstraintStore
        return ConstraintStore
    if name == "OrderingRule":
        from pageorder.rules.schema import OrderingRule
        return OrderingRule
    if name == "is_compliant":
        from pageorder.rules.validator import is_compliant
        return is_compliant
    if name == "sum_middle_of_compliant":
        from pageorder.rules.aggregator import sum_middle_of_compliant
        return sum_middle_of_compliant
    if name == "PreconditionViolation":
        from pageorder.errors import PreconditionViolation
        return PreconditionViolation
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
