"""Obsidian module tool implementations.

Notes are Markdown files under the vault root, optionally with YAML
frontmatter. File I/O runs in worker threads via ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import frontmatter
import structlog
import yaml

from shared.errors import CapabilityError

logger = structlog.get_logger()


class ObsidianTools:
    """Tool implementations for a filesystem-backed Obsidian vault."""

    def __init__(self, vault_path: str | Path):
        self.root = Path(vault_path).expanduser().resolve()

    def _resolve(self, note_path: str) -> Path:
        """Absolute path of a vault-relative note; rejects paths outside the vault."""
        full = (self.root / note_path).resolve()
        if full == self.root or not full.is_relative_to(self.root):
            raise CapabilityError(f"Path is outside the vault: {note_path}")
        return full

    def _load(self, full: Path) -> dict[str, Any]:
        post = frontmatter.loads(full.read_text(encoding="utf-8"))
        return {
            "title": full.stem,
            "content": post.content,
            "path": full.relative_to(self.root).as_posix(),
            "frontmatter": post.metadata,
        }

    async def read_note(self, path: str) -> dict[str, Any]:
        """Read a note and split out its frontmatter."""
        full = self._resolve(path)
        if not full.is_file():
            raise CapabilityError(f"Note not found: {path}")
        return await asyncio.to_thread(self._load, full)

    async def write_note(self, path: str, content: str, frontmatter: dict[str, Any] | None = None) -> str:
        """Create or overwrite a note, creating parent folders as needed."""
        full = self._resolve(path)
        text = _render(content, frontmatter)

        def _write() -> None:
            full.parent.mkdir(parents=True, exist_ok=True)
            full.write_text(text, encoding="utf-8")

        await asyncio.to_thread(_write)
        logger.info("note_written", path=path, bytes=len(text))
        return f"Note written successfully to {path}"

    async def search_notes(self, query: str) -> list[dict[str, Any]]:
        """Case-insensitive substring search over note titles and bodies."""
        needle = query.lower()

        def _search() -> list[dict[str, Any]]:
            matches = []
            for full in sorted(self.root.rglob("*.md")):
                relative = full.relative_to(self.root)
                # Skip .obsidian, .trash and other hidden folders.
                if any(part.startswith(".") for part in relative.parts):
                    continue
                try:
                    note = self._load(full)
                except (OSError, ValueError, yaml.YAMLError) as e:
                    logger.warning("note_unreadable", path=relative.as_posix(), error=str(e))
                    continue
                if needle in note["content"].lower() or needle in note["title"].lower():
                    matches.append(note)
            return matches

        results = await asyncio.to_thread(_search)
        logger.info("notes_searched", query=query, matches=len(results))
        return results


def _render(content: str, metadata: dict[str, Any] | None) -> str:
    if not metadata:
        return content
    return frontmatter.dumps(frontmatter.Post(content, **metadata))
