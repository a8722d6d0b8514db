#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Launch the terminal raycaster (see ``raymaze.cli`` for options)."""

import sys

from raymaze.cli import cli

if __name__ == "__main__":
    sys.exit(cli())
