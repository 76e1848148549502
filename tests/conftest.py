"""Shared pytest fixtures and test helpers for postctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl.config.settings import PostSettings
from postctl.infrastructure.store import PostStore

CLR_POST = '''\
---
layout: post
title: "Compositional data analysis of microbiome counts"
author: ap
categories: [ microbiome, R ]
image: assets/images/clr-header.png
featured: true
---

Counts are compositional, so we move to log-ratios first.

```r
library(compositions)
clr_counts <- clr(counts + 0.5)
```
'''

SETUP_POST = """\
---
layout: post
title: "Writing a post for this blog"
author: jd
categories: [ howto ]
hidden: true
---

```sh
git checkout -b my-post
```
"""

NO_TITLE_POST = """\
---
layout: post
author: ap
---

Body without a title.
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def site_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary site directory with ``_posts/`` and ``assets/``."""
    monkeypatch.delenv("POSTCTL_CONFIG", raising=False)
    (tmp_path / "_posts").mkdir()
    (tmp_path / "assets" / "images").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def store(site_root: Path) -> PostStore:
    """PostStore over the temporary site with default settings."""
    return PostStore(PostSettings.from_cli(site_root=site_root))


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp site so the CLI picks it up as site root.

    Use via ``@pytest.mark.usefixtures("_isolated_site")`` on command test
    classes.
    """
    monkeypatch.chdir(site_root)


def write_post(site_root: Path, name: str, content: str) -> Path:
    """Write *content* to ``_posts/<name>`` and return the path."""
    path = site_root / "_posts" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
