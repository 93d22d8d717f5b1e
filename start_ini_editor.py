#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
INI Preset Editor - Startup Script

Runs the command line front end from a source checkout without
installing the package.
"""

import os
import sys

if __name__ == "__main__":
    repo_root = os.path.dirname(os.path.abspath(__file__))
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)

    from ini_editor.cli import main

    raise SystemExit(main())
