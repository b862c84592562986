"""Output variables and the failure signal handed back to the host pipeline."""
import sys
import uuid
from typing import Dict, Optional, TextIO


class PipelineOutputs:
    """
    Write step outputs the way GitHub Actions reads them.

    With an output file (``$GITHUB_OUTPUT``) values are appended as
    ``name=value`` lines, or in the delimiter form for multi-line values.
    Without one they are printed so a person running the tool by hand can
    still see them.
    """

    def __init__(self, output_file: Optional[str] = None, stream: Optional[TextIO] = None):
        self.output_file = output_file
        self.stream = stream or sys.stdout
        self.values: Dict[str, str] = {}
        self.failure: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def set_output(self, name: str, value: str):
        value = str(value)
        self.values[name] = value
        if not self.output_file:
            print(f"{name}={value}", file=self.stream)
            return

        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            line = f"{name}={value}\n"
        with open(self.output_file, "a", encoding="utf-8") as f:
            f.write(line)

    def set_failed(self, message: str):
        self.failure = message
        print(f"::error::{message}", file=self.stream)
