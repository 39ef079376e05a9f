#!/usr/bin/env python3
"""
jira-pr-tool

Thin entrypoint that delegates to the package in `app/jpt/`.
"""
from __future__ import annotations

import sys

from jpt.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n⚠️  Process interrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"\n💥 Error occurred: {e}")
        raise
