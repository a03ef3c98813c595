from __future__ import annotations


class PipelineError(Exception):
    stage = "pipeline"

    def __init__(self, message: str, details: list[str] | None = None, stage: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        text = f"[{self.stage}] {self.message}"
        if self.details:
            text += ": " + ", ".join(self.details)
        return text


class DataUnavailable(PipelineError):
    stage = "load"


class SchemaMismatch(PipelineError):
    stage = "load"


class StateNotFound(PipelineError):
    stage = "reshape"


class DateParseError(PipelineError):
    stage = "reshape"


class InsufficientData(PipelineError):
    stage = "fit"


class DegenerateInput(PipelineError):
    stage = "fit"
