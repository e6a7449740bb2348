"""Shared fixtures: boilerplate-shaped project trees on disk."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

BOILERPLATE_README = """# Modern Fullstack Boilerplate

Clone modern-fullstack-boilerplate and run `pnpm dev`.
"""

FRONTEND_HTML = """<!doctype html>
<html>
  <head><title>Modern Fullstack Boilerplate</title></head>
  <body><div id="root"></div></body>
</html>
"""


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4), encoding="utf-8")


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Build a project tree shaped like the boilerplate.

    Sub-packages ``backend``, ``frontend`` and ``shared`` are scoped
    under ``scope`` (``@repo`` by default).
    """

    def _make(name: str = "modern-fullstack-boilerplate", scope: str = "@repo") -> Path:
        root = tmp_path / name
        root.mkdir()
        write_json(
            root / "package.json",
            {"name": "modern-fullstack-boilerplate", "private": True, "version": "0.0.0"},
        )
        write_json(
            root / "packages" / "shared" / "package.json",
            {"name": f"{scope}/shared", "version": "0.0.0"},
        )
        write_json(
            root / "packages" / "backend" / "package.json",
            {
                "name": f"{scope}/backend",
                "dependencies": {f"{scope}/shared": "workspace:*", "express": "^4.19.0"},
                "devDependencies": {"@types/node": "^20.0.0"},
            },
        )
        write_json(
            root / "packages" / "frontend" / "package.json",
            {
                "name": f"{scope}/frontend",
                "dependencies": {"react": "^18.3.0", f"{scope}/shared": "workspace:*"},
                "devDependencies": {f"{scope}/shared": "workspace:*", "vite": "^5.0.0"},
            },
        )

        backend_src = root / "packages" / "backend" / "src"
        (backend_src / "routes").mkdir(parents=True)
        (backend_src / "index.ts").write_text(
            f'import {{ User }} from "{scope}/shared";\n'
            'const app = "modern-fullstack-boilerplate";\n',
            encoding="utf-8",
        )
        (backend_src / "routes" / "health.ts").write_text(
            'export const service = "modern-fullstack-boilerplate";\n',
            encoding="utf-8",
        )
        (backend_src / "notes.md").write_text(
            f"uses {scope}/shared\n", encoding="utf-8"
        )

        frontend = root / "packages" / "frontend"
        (frontend / "src").mkdir(parents=True)
        (frontend / "src" / "App.tsx").write_text(
            f'import {{ Button }} from "{scope}/shared/ui";\n', encoding="utf-8"
        )
        (frontend / "index.html").write_text(FRONTEND_HTML, encoding="utf-8")
        (root / "README.md").write_text(BOILERPLATE_README, encoding="utf-8")
        return root

    return _make
