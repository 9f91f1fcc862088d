"""
Output formatter for exporting scene results.

Supports:
- JSON: Full structured output with metadata
- YAML: Same structure, human-editable
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


class OutputFormatter:
    """Formatter for exporting scene results.

    Example:
        >>> formatter = OutputFormatter()
        >>> formatter.save(result, "scene.json", format="json")
        >>> formatter.save(result, "scene.yaml", format="yaml")
    """

    def save(self, result, output_path: str, format: str = "json") -> str:
        """Save a scene result to file.

        Args:
            result: SceneResult object
            output_path: Output file path
            format: Output format (json, yaml)

        Returns:
            Path to saved file

        Raises:
            ValueError: If format is not supported
        """
        format = format.lower()

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        document = self._build_document(result)

        if format == "json":
            with open(output_path, 'w') as f:
                json.dump(document, f, indent=2)
        elif format in ("yaml", "yml"):
            with open(output_path, 'w') as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
        else:
            raise ValueError(f"Unsupported format: {format}")

        logger.info(f"Saved {format.upper()} output to {output_path}")
        return str(output_path)

    @staticmethod
    def _build_document(result) -> Dict[str, Any]:
        return {
            "metadata": {
                "format_version": "1.0",
                "created": datetime.now().isoformat(),
                "software": "geosun",
            },
            "results": result.to_dict(),
        }
