"""Observability and telemetry for the evaluator."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class RecordType(str, Enum):
    """Types of trace records."""
    OPERATION = "operation"
    NODE_ENTRY = "node_entry"
    NODE_EXIT = "node_exit"


@dataclass
class TraceRecord:
    """Base class for trace records."""
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        record_type = getattr(self, 'record_type', None)
        return {
            "timestamp": self.timestamp.isoformat(),
            "type": record_type.value if record_type else "unknown",
            **{k: v for k, v in self.__dict__.items() if k not in ("timestamp", "record_type")}
        }


@dataclass
class OperationRecord(TraceRecord):
    """One operator applied while evaluating. `left` is None for unary minus."""
    operator: str
    left: Optional[int]
    right: int
    result: int
    offset: int
    record_type: RecordType = field(default=RecordType.OPERATION, init=False)

    def describe(self) -> str:
        if self.left is None:
            return f"{self.operator}({self.right}) = {self.result}"
        return f"{self.left} {self.operator} {self.right} = {self.result}"


@dataclass
class NodeEntryRecord(TraceRecord):
    """Record for node entry."""
    node_name: str
    expression: str
    record_type: RecordType = field(default=RecordType.NODE_ENTRY, init=False)


@dataclass
class NodeExitRecord(TraceRecord):
    """Record for node exit."""
    node_name: str
    final_answer: Optional[str] = None
    record_type: RecordType = field(default=RecordType.NODE_EXIT, init=False)


# In-memory trace storage
_trace_log: List[TraceRecord] = []


def log_operation(operator: str, left: Optional[int], right: int, result: int, offset: int):
    """Log one applied operator."""
    record = OperationRecord(
        timestamp=datetime.now(),
        operator=operator,
        left=left,
        right=right,
        result=result,
        offset=offset
    )
    _trace_log.append(record)
    logger.debug(f"🔢 {record.describe()} (offset {offset})")


def log_node_entry(node_name: str, state: Dict):
    """Log when entering a node."""
    record = NodeEntryRecord(
        timestamp=datetime.now(),
        node_name=node_name,
        expression=state.get("expression", "")[:50]
    )
    _trace_log.append(record)
    logger.debug(f"📍 Entering node: {node_name}")


def log_node_exit(node_name: str, state: Dict):
    """Log when exiting a node."""
    record = NodeExitRecord(
        timestamp=datetime.now(),
        node_name=node_name,
        final_answer=state.get("final_answer")
    )
    _trace_log.append(record)
    logger.debug(f"📍 Exiting node: {node_name}")


def get_trace() -> List[TraceRecord]:
    """Get the full trace log."""
    return _trace_log.copy()


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_operations() -> List[OperationRecord]:
    """Get all operation records."""
    return [r for r in _trace_log if isinstance(r, OperationRecord)]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["=== Evaluation Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        if isinstance(record, OperationRecord):
            lines.append(
                f"[{timestamp}] @{record.offset}: {record.describe()}")
        elif isinstance(record, NodeEntryRecord):
            lines.append(f"[{timestamp}] ENTER: {record.node_name}")
        elif isinstance(record, NodeExitRecord):
            lines.append(f"[{timestamp}] EXIT: {record.node_name}")

    return "\n".join(lines)
