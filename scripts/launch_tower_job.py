#!/usr/bin/env python3
"""
Launch an Ansible Tower/AWX job template and wait for it to finish.

Usage:
    python3 launch_tower_job.py --template-id 42

    Override defaults with environment variables:
        AWX_HOST=https://awx.lab.local
        AWX_USERNAME=admin
        AWX_PASSWORD=password
"""
import sys

from tower_launcher.cli import main

if __name__ == "__main__":
    sys.exit(main())
