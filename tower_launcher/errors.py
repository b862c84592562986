"""Failure kinds of a launch run. Every one of them ends the run."""


class TowerLaunchError(Exception):
    """Base class for all launch run failures."""


class ParseError(TowerLaunchError, ValueError):
    """The additional vars input is not valid JSON."""


class LaunchRejected(TowerLaunchError):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class LaunchUnavailable(TowerLaunchError):
    def __init__(self, template_id: str):
        super().__init__(
            f"Template ID {template_id} couldn't be launched, the Ansible API is not working"
        )
        self.template_id = template_id


class StatusFetchRejected(TowerLaunchError):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class StatusFetchUnavailable(TowerLaunchError):
    def __init__(self):
        super().__init__("Failed to get job status from Ansible Tower.")


class JobFailed(TowerLaunchError):
    def __init__(self, job_id):
        super().__init__(f"Ansible tower job {job_id} execution failed")
        self.job_id = job_id


class JobErrored(TowerLaunchError):
    def __init__(self, job_id):
        super().__init__(f"An error has occurred on Ansible tower trying to launch job {job_id}")
        self.job_id = job_id


class JobOutputUnavailable(TowerLaunchError):
    def __init__(self, job_id):
        super().__init__(f"Ansible tower job {job_id} has no output URL")
        self.job_id = job_id
