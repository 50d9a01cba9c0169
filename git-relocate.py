#!/usr/bin/env python3
"""
git-relocate - Move or copy all git repositories found under a directory.

Every immediate subdirectory of SOURCE that contains a .git entry is
recreated under DESTINATION, named after the subdirectory's resolved name.
Names listed in the repository's top-level .gitignore are matched literally
and left out of the copy. Without --copy the source repository is deleted
once its copy has completed.

Copyright (c) 2026 git-relocate contributors
Licensed under the MIT License. See LICENSE file for details.

License: MIT
"""

from __future__ import annotations

import sys
from typing import NoReturn

from argument_parser import parse_arguments
from relocation_orchestrator import RelocationOrchestrator

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1


def main() -> NoReturn:
    if __name__ != "__main__":
        sys.exit(EXIT_EXECUTION_ERROR)

    cfg = parse_arguments()
    orchestrator = RelocationOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
