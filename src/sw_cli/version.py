"""Release constants for sw-cli.

These are the values a build bakes into the distribution.  Per-build
metadata (host, commit, timestamp) is captured separately, see
:mod:`sw_cli.infra.build_metadata`.
"""

from __future__ import annotations

__version__: str = "0.1.0"

COPYRIGHT: str = "Copyright (c) 2025 Software Wrighter"

LICENSE_NAME: str = "MIT"

LICENSE_URL: str = "https://github.com/softwarewrighter/sw-cli/blob/main/LICENSE"
