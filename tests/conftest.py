"""Shared fixtures.

No test touches the real network: HTTP is mocked with ``respx`` at the
transport layer, and settings are built without reading any ``.env`` file.
"""

from __future__ import annotations

import pytest

from core.config import AppSettings

PROFILE_URL = "https://www.linkedin.com/in/jane-doe/"

PROFILE_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Jane Doe - Software Engineer | LinkedIn</title></head>
<body><main><h1>Jane Doe</h1><p>Software Engineer at Example Corp</p></main></body>
</html>
"""

AUTHWALL_HTML = """\
<html><head>
<script>window.location.href = "https://www.linkedin.com/authwall?trk=bf&sessionRedirect=https%3A%2F%2Fwww.linkedin.com%2Fin%2Fjane-doe";</script>
</head><body></body></html>
"""

NOT_FOUND_HTML = """\
<html><body><h1>This page doesn&#39;t exist</h1>
<p>Please check your URL or return to LinkedIn home.</p></body></html>
"""


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, http_timeout_seconds=5.0, batch_delay_seconds=0.0)
