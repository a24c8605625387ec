"""Generated file emission — write a GeneratedFile under the project root."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_generated_file(project_root: Path, file_data: dict) -> dict:
    """Write a GeneratedFile to disk.

    Identical content already on disk counts as success without a
    rewrite, so regeneration from unchanged axes is a no-op.

    Args:
        project_root: Project root directory.
        file_data: Dict with 'path', 'content', 'overwrite'.

    Returns:
        {"ok": True, "path": "...", "written": bool, "changed": bool}
        or {"error": "..."}
    """
    rel_path = file_data.get("path", "")
    content = file_data.get("content", "")
    overwrite = file_data.get("overwrite", False)

    if not rel_path or not content:
        return {"error": "Missing path or content"}

    target = project_root / rel_path
    try:
        target.resolve().relative_to(project_root.resolve())
    except ValueError:
        return {"error": f"Refusing to write outside the project root: {rel_path}"}

    if target.exists():
        try:
            old_content = target.read_text(encoding="utf-8")
        except OSError as e:
            return {"error": f"Cannot read {rel_path}: {e}"}

        if old_content == content:
            logger.info("Generated file unchanged: %s", target)
            return {"ok": True, "path": rel_path, "written": False, "changed": False}

        if not overwrite:
            return {
                "error": f"File already exists: {rel_path} (use --overwrite to replace)",
                "path": rel_path,
                "written": False,
            }

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        return {"error": f"Cannot write {rel_path}: {e}"}

    logger.info("Wrote generated file: %s", target)
    return {"ok": True, "path": rel_path, "written": True, "changed": True}
