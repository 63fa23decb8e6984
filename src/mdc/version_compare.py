"""Relational comparison of MDC content versions.

Comparison walks the components from major to dev and stops at the first
difference. Operators form a closed set; raw tokens are only accepted
through parse_operator.
"""

from __future__ import annotations

from enum import Enum

from core.errors import UnknownOperatorError
from mdc.version_id import VersionId


class CompareOp(str, Enum):
    """Relational operator applied by compare."""

    EQ = "=="
    LT = "<"
    GT = ">"
    GE = ">="
    LE = "<="


def parse_operator(token: object) -> CompareOp:
    """Resolve an operator token into a comparison operator.

    Args:
        token: A CompareOp member or one of ``==, <, >, >=, <=``.

    Returns:
        Matching comparison operator.

    Raises:
        UnknownOperatorError: If token is not a supported operator.
    """
    if isinstance(token, CompareOp):
        return token
    if isinstance(token, str):
        for operator in CompareOp:
            if operator.value == token:
                return operator
    raise UnknownOperatorError(
        f"Unsupported comparison operator {token!r}. "
        f"Use one of {', '.join(op.value for op in CompareOp)}."
    )


def compare(left: VersionId, op: CompareOp, right: VersionId) -> bool:
    """Evaluate ``left op right`` over four-component versions."""
    operator = parse_operator(op)
    sign = _ordering_sign(left, right)
    if operator is CompareOp.EQ:
        return sign == 0
    if operator is CompareOp.LT:
        return sign < 0
    if operator is CompareOp.GT:
        return sign > 0
    if operator is CompareOp.GE:
        return sign >= 0
    return sign <= 0


def compare_literal(
    left: VersionId,
    op: CompareOp,
    major: int,
    minor: int,
    patch: int,
    dev: int,
) -> bool:
    """Compare a version against four literal components.

    Raises:
        VersionFormatError: If a literal component is out of range.
        UnknownOperatorError: If op is not a supported operator.
    """
    right = VersionId(major=major, minor=minor, patch=patch, dev=dev)
    return compare(left, op, right)


def _ordering_sign(left: VersionId, right: VersionId) -> int:
    for left_part, right_part in zip(left.components, right.components):
        if left_part != right_part:
            return 1 if left_part > right_part else -1
    return 0
