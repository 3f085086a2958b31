from typing import TypedDict, Optional
from rdcalc.parser.state import ErrorKind


class State(TypedDict):
    expression: str
    result: Optional[int]
    error_kind: Optional[ErrorKind]
    error_offset: Optional[int]
    refusal: Optional[str]
    final_answer: Optional[str]
    succeeded: bool
    trace: bool


def build_initial_state(expression: str, trace: bool = False) -> State:
    state = State(
        expression=expression,
        result=None,
        error_kind=None,
        error_offset=None,
        refusal=None,
        final_answer="",
        succeeded=False,
        trace=trace)
    return state
