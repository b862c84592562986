"""Pick the resource name out of a job's text output."""
import re
from typing import Optional

from tower_launcher.outputs import PipelineOutputs

RESOURCE_NAME_OUTPUT = "RESOURCE_NAME"

# "/name\" or "/name"" - the last one in the output names the resource
RESOURCE_PATTERN = re.compile(r'/\w+\\|/\w+"', re.ASCII)


def find_resource_name(output: str) -> Optional[str]:
    matches = RESOURCE_PATTERN.findall(output or "")
    if not matches:
        return None
    return matches[-1][1:-1]


def export_resource_name(output: str, outputs: PipelineOutputs) -> Optional[str]:
    resource_name = find_resource_name(output)
    if resource_name is None:
        print("WARNING: No resource name exported as output variable.")
        return None
    outputs.set_output(RESOURCE_NAME_OUTPUT, resource_name)
    print(f"Resource name exported: {resource_name}")
    return resource_name
