"""Human-readable error reports that point at the failing input position."""
from rdcalc.parser.state import ErrorKind

ERROR_MESSAGES = {
    ErrorKind.SYNTAX: "Syntax error",
    ErrorKind.DIVISION_BY_ZERO: "Division by 0",
    ErrorKind.UNCLOSED_PARENTHESIS: "Expecting )",
    ErrorKind.NESTING_TOO_DEEP: "Expression nested too deeply",
}


def error_message(kind: ErrorKind) -> str:
    return ERROR_MESSAGES.get(kind, "Unknown error")


def render_error(text: str, offset: int, kind: ErrorKind) -> str:
    """
    Render the input, a caret under `offset` and the error message.

    Example:
        1 + (2 * 3
                  ^
        Expecting )
    """
    # Tabs are kept so the caret lines up with what a terminal shows
    padding = "".join("\t" if c == "\t" else " " for c in text[:offset])
    return f"{text}\n{padding}^\n{error_message(kind)}"
