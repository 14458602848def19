"""Tag every package from the last `lerna publish` run.

    python scripts/tag_release.py --tag next

Reads ../lerna-publish-summary.json relative to this file.
"""

from __future__ import annotations

from pathlib import Path

from disttag.cli.app import main


if __name__ == "__main__":
    main(script=Path(__file__))
