"""
Job lifecycle on the Tower/AWX side: launch, wait for a terminal state and
print the job output.
"""
import time
from typing import Any, Callable, Dict

import requests

from tower_launcher.config import DEFAULT_POLL_INTERVAL
from tower_launcher.errors import (
    JobErrored,
    JobFailed,
    JobOutputUnavailable,
    LaunchRejected,
    LaunchUnavailable,
    StatusFetchRejected,
    StatusFetchUnavailable,
)
from tower_launcher.request import RequestContext

TERMINAL_STATUSES = ("successful", "failed", "error")
BANNER_WIDTH = 80


def banner(title: str) -> str:
    return f" {title} ".center(BANNER_WIDTH, "*")


def launch_job(ctx: RequestContext) -> str:
    """Launch the job template and return the URL of the created job."""
    template_id = ctx.template_id
    print(f"Launching Template ID: {template_id}")

    try:
        response = ctx.client.post_json(
            f"api/v2/job_templates/{template_id}/launch/", ctx.extra_vars
        )
    except requests.exceptions.ConnectionError as e:
        print(f"ERROR: Cannot connect to {ctx.client.base_url}: {e}")
        raise LaunchUnavailable(template_id) from e

    if isinstance(response, dict) and response.get("job"):
        print(f"Template Id {template_id} launched successfully.")
        print(f"Job {response['job']} was created on Ansible Tower: Status {response.get('status')}.")
        return response["url"]

    if isinstance(response, dict) and response.get("detail"):
        print(f"Template ID {template_id} couldn't be launched, "
              f"the Ansible API is returning the following error:")
        print(response)
        raise LaunchRejected(response["detail"])

    print(response)
    raise LaunchUnavailable(template_id)


def fetch_status(ctx: RequestContext, job_url: str) -> Dict[str, Any]:
    """Fetch one status snapshot of the job."""
    try:
        response = ctx.client.get_json(job_url)
    except requests.exceptions.ConnectionError as e:
        print(f"ERROR: Cannot connect to {ctx.client.base_url}: {e}")
        raise StatusFetchUnavailable() from e

    if isinstance(response, dict) and response.get("status"):
        return response

    print("Failed to get job status from Ansible Tower.")
    print(response)
    if isinstance(response, dict) and response.get("detail"):
        raise StatusFetchRejected(response["detail"])
    raise StatusFetchUnavailable()


def wait_for_job(
    ctx: RequestContext,
    job_url: str,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict[str, Any]:
    """
    Poll the job until its status is successful, failed or error.

    There is no timeout: any other status is polled again after
    ``poll_interval`` seconds, for as long as the job takes. The returned
    snapshot is the last one fetched.
    """
    while True:
        job = fetch_status(ctx, job_url)
        status = job["status"]
        if status in TERMINAL_STATUSES:
            return job
        print("Validating Job status...")
        print(f"Job status: {status}.")
        sleep(poll_interval)


def fetch_output(ctx: RequestContext, job: Dict[str, Any]) -> str:
    """
    Print the job's text output and fail the run for failed or errored jobs.

    Output that cannot be classified is printed with a warning and returned
    so the resource name export still gets a chance to run.
    """
    stdout_url = (job.get("related") or {}).get("stdout")
    if not stdout_url:
        print(f"Final status: {job.get('status')}")
        print("ERROR: The job has no output URL")
        print(job)
        raise JobOutputUnavailable(job.get("id"))

    output = ctx.client.get_text(stdout_url, params={"format": "txt"})
    status = job.get("status")

    print(f"Final status: {status}")

    if status == "failed" and output:
        print(banner("Ansible Tower error output"))
        print(output)
        raise JobFailed(job.get("id"))

    if status == "error":
        print(banner("Ansible Tower error output"))
        print(output)
        print(banner("Ansible Tower traceback output"))
        print(job.get("result_traceback"))
        raise JobErrored(job.get("id"))

    if status == "successful" and output:
        print(banner("Ansible Tower output"))
        print(output)
    else:
        print("WARNING: An error occurred trying to get the ansible tower output")
        print(output)

    return output
