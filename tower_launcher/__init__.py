"""
Launch an Ansible Tower / AWX job template from a CI pipeline.

The run is a straight line: build the launch request, launch the template,
poll the job until it reaches a terminal state, print its output and export
the resource name found in that output as the ``RESOURCE_NAME`` output
variable.
"""
from tower_launcher.errors import (
    JobErrored,
    JobFailed,
    JobOutputUnavailable,
    LaunchRejected,
    LaunchUnavailable,
    ParseError,
    StatusFetchRejected,
    StatusFetchUnavailable,
    TowerLaunchError,
)

__version__ = "1.0.0"

__all__ = [
    "JobErrored",
    "JobFailed",
    "JobOutputUnavailable",
    "LaunchRejected",
    "LaunchUnavailable",
    "ParseError",
    "StatusFetchRejected",
    "StatusFetchUnavailable",
    "TowerLaunchError",
]
