import logging
from pathlib import Path
from typing import List

from folio.exceptions import ContentError

logger = logging.getLogger(__name__)


class ContentParser:
    """Reads Markdown sources from the content directory."""

    def __init__(self, root: Path | str, prefix: str = "blog/"):
        self.root = Path(root)
        self.prefix = prefix

    def list_markdown_paths(self) -> List[str]:
        """Return content-relative POSIX paths of every post, sorted."""
        blog_dir = self.root / self.prefix.strip("/")
        if not blog_dir.is_dir():
            logger.warning(f"Content directory {blog_dir} does not exist")
            return []

        paths = [
            path.relative_to(self.root).as_posix()
            for path in blog_dir.rglob("*.md")
            if path.is_file()
        ]
        return sorted(paths)

    def get_markdown_content(self, relative_path: str) -> str:
        """Get the full markdown content of a file (front-matter included)."""
        path = self.root / relative_path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentError(f"Cannot read content file: {e}", path=relative_path) from e
