"""
Launch a Tower/AWX job template and wait for it to finish.

Usage:
    tower-launch --url https://tower.example.com --username admin \
        --password secret --template-id 42 --additional-vars '{"env": "dev"}'

    Inside a GitHub Actions step the action inputs are read from the
    environment and RESOURCE_NAME is written to $GITHUB_OUTPUT.
"""
import sys
import time
import traceback
from typing import Callable, List, Optional

import requests

from tower_launcher.config import Settings, parse_args
from tower_launcher.errors import ParseError
from tower_launcher.job import fetch_output, launch_job, wait_for_job
from tower_launcher.outputs import PipelineOutputs
from tower_launcher.request import build_request
from tower_launcher.resource import export_resource_name

INVALID_JSON_MESSAGE = "Extra vars invalid format, please provide a valid JSON."
GENERIC_FAILURE_MESSAGE = "error"


def run(settings: Settings, outputs: PipelineOutputs,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep) -> int:
    """Run the whole flow once. Returns the process exit code."""
    try:
        ctx = build_request(settings, session=session)
        job_url = launch_job(ctx)
        job = wait_for_job(ctx, job_url, poll_interval=settings.poll_interval, sleep=sleep)
        output = fetch_output(ctx, job)
        export_resource_name(output, outputs)
        return 0

    except ParseError as e:
        print(f"\nERROR: {e}")
        outputs.set_failed(INVALID_JSON_MESSAGE)
        return 1
    except requests.exceptions.HTTPError as e:
        print(f"\nERROR: API request failed: {e}")
        if e.response is not None:
            print(f"       Response: {e.response.text[:500]}")
        outputs.set_failed(GENERIC_FAILURE_MESSAGE)
        return 1
    except Exception as e:
        print(f"\nERROR: {e}")
        traceback.print_exc()
        outputs.set_failed(GENERIC_FAILURE_MESSAGE)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_args(argv)
    print("=" * 60)
    print(" Ansible Tower/AWX Job Launcher")
    print("=" * 60)
    print(f" Host:     {settings.url}")
    print(f" User:     {settings.username}")
    print(f" Template: {settings.template_id}")
    print("=" * 60)
    return run(settings, PipelineOutputs(settings.output_file))


if __name__ == "__main__":
    sys.exit(main())
