"""Guards and policies applied to expressions before they are parsed."""
import logging
from typing import Optional, Tuple
from rdcalc.config import MAX_EXPRESSION_LENGTH

logger = logging.getLogger(__name__)


def check_expression_length(
    expression: str,
    max_length: Optional[int] = None
) -> Tuple[bool, Optional[str]]:
    """
    Check that an expression is not longer than the configured limit.

    Args:
        expression: Expression to check
        max_length: Limit to use instead of MAX_EXPRESSION_LENGTH (0 disables)

    Returns:
        (is_valid, error_message) tuple
    """
    limit = MAX_EXPRESSION_LENGTH if max_length is None else max_length
    if limit and len(expression) > limit:
        error_msg = f"Expression is {len(expression)} characters long, the limit is {limit}"
        logger.warning(error_msg)
        return False, error_msg
    logger.debug(f"Expression length ok: {len(expression)}")
    return True, None


def apply_guards(
    expression: str,
    max_length: Optional[int] = None
) -> Tuple[bool, Optional[str]]:
    """
    Apply all guards to an expression.

    Returns:
        (passed, refusal_message) tuple
    """
    is_valid, error = check_expression_length(expression, max_length)
    if not is_valid:
        logger.warning(f"Guard check failed: {error}")
        return False, error

    logger.debug("All guard checks passed")
    return True, None
