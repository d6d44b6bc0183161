from enum import Enum
from datetime import datetime
from typing import Optional


class ResultStatus(Enum):
    GENERATED = "generated"
    NOT_FOUND = "not_found"
    NOT_A_CLASS = "not_a_class"


class GenerationResult:
    def __init__(
        self,
        class_name: str,
        status: ResultStatus,
        message: str,
        output_path: Optional[str] = None,
        timestamp: Optional[str] = None
    ):
        if not isinstance(status, ResultStatus):
            raise TypeError(f"status must be ResultStatus enum, got {type(status)}")

        self.class_name = class_name
        self.status = status
        self.message = message
        self.output_path = output_path
        self.timestamp = timestamp or datetime.now().isoformat()

    @property
    def generated(self) -> bool:
        return self.status == ResultStatus.GENERATED

    def __repr__(self) -> str:
        return f"GenerationResult({self.class_name}: status={self.status.value}, message={self.message[:50]}...)"
