"""JSON file writer for search output."""

import re
from datetime import datetime, timezone
from pathlib import Path

import aiofiles
import structlog

from ..models.search_output import SearchOutput

logger = structlog.get_logger()


class JsonWriter:
    """Writes search output documents to disk."""

    def __init__(self, output_dir: str = "."):
        """Initialize JSON writer.

        Args:
            output_dir: Directory for generated filenames
        """
        self.output_dir = Path(output_dir)

    def _sanitize_filename(self, text: str) -> str:
        """Make a query label safe for use in a filename."""
        sanitized = re.sub(r"[^\w\-]", "_", text)
        sanitized = re.sub(r"_+", "_", sanitized)
        return sanitized.strip("_")[:50] or "search"

    def generate_filename(self, query: str) -> str:
        """Build a timestamped filename for a query label.

        Args:
            query: Combined query label

        Returns:
            Filename such as ``gold_silver_20250101_100000.json``
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        return f"{self._sanitize_filename(query)}_{timestamp}.json"

    async def write_search_output(self, output: SearchOutput, path: str | None = None) -> str:
        """Write search output as JSON.

        Args:
            output: SearchOutput to save
            path: Target file; a directory or None uses a generated name

        Returns:
            Path to the saved file
        """
        if path is None:
            filepath = self.output_dir / self.generate_filename(output.query)
        else:
            filepath = Path(path)
            if filepath.is_dir():
                filepath = filepath / self.generate_filename(output.query)

        filepath.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(filepath, "w", encoding="utf-8") as f:
            await f.write(output.model_dump_json(indent=2, by_alias=True))

        logger.info(
            "saved_search_output",
            filepath=str(filepath),
            news=len(output.news),
            posts=len(output.posts),
        )
        return str(filepath)
