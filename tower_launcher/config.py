"""
Run settings.

The host pipeline passes action inputs as ``INPUT_<NAME>`` environment
variables. The plain AWX variables are honoured as fallbacks so the tool can
also be run by hand:

    AWX_HOST=https://awx.lab.local
    AWX_USERNAME=admin
    AWX_PASSWORD=password

Command line flags override both.
"""
import argparse
import os
from typing import List, Optional

DEFAULT_POLL_INTERVAL = 10


def input_value(name: str, *fallbacks: str, default: str = "") -> str:
    """Read an action input, then each fallback environment variable."""
    for key in (f"INPUT_{name.upper()}",) + fallbacks:
        value = os.environ.get(key, "").strip()
        if value:
            return value
    return default


class Settings:
    """Validated inputs for a single launch run."""

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        template_id: str,
        certificate_path: Optional[str] = None,
        scm_branch: str = "",
        additional_vars: str = "{}",
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        output_file: Optional[str] = None,
    ):
        self.url = url
        self.username = username
        self.password = password
        self.template_id = str(template_id)
        self.certificate_path = certificate_path or None
        self.scm_branch = scm_branch or ""
        self.additional_vars = additional_vars or "{}"
        self.poll_interval = poll_interval
        self.output_file = output_file or None

    def __repr__(self):
        # password stays out of logs and tracebacks
        return (
            f"Settings(url={self.url!r}, username={self.username!r}, "
            f"template_id={self.template_id!r}, scm_branch={self.scm_branch!r})"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tower-launch",
        description="Launch an Ansible Tower/AWX job template and wait for it to finish.",
    )
    parser.add_argument("--url", default=input_value("ansible-tower-url", "AWX_HOST"),
                        help="Tower/AWX base URL")
    parser.add_argument("--username", default=input_value("ansible-tower-user", "AWX_USERNAME"))
    parser.add_argument("--password", default=input_value("ansible-tower-pass", "AWX_PASSWORD"))
    parser.add_argument("--template-id", default=input_value("template-id"),
                        help="job template to launch")
    parser.add_argument("--certificate-path", default=input_value("certificate-path"),
                        help="file sent base64 encoded as the gateway SSL certificate")
    parser.add_argument("--scm-branch", default=input_value("scm-branch"))
    parser.add_argument("--additional-vars", default=input_value("additional-vars", default="{}"),
                        help="JSON object merged into extra_vars")
    parser.add_argument("--poll-interval", type=float,
                        default=input_value("poll-interval", default=str(DEFAULT_POLL_INTERVAL)),
                        help="seconds between job status checks (default: %(default)s)")
    parser.add_argument("--output-file", default=os.environ.get("GITHUB_OUTPUT", ""),
                        help="file receiving output variables (default: $GITHUB_OUTPUT)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)

    missing = [
        flag for flag, value in (
            ("--url", args.url),
            ("--username", args.username),
            ("--password", args.password),
            ("--template-id", args.template_id),
        ) if not value
    ]
    if missing:
        parser.error(f"missing required settings: {', '.join(missing)}")

    return Settings(
        url=args.url,
        username=args.username,
        password=args.password,
        template_id=args.template_id,
        certificate_path=args.certificate_path,
        scm_branch=args.scm_branch,
        additional_vars=args.additional_vars,
        poll_interval=args.poll_interval,
        output_file=args.output_file,
    )
