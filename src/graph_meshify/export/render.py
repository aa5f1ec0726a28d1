"""
Image rendering through the Graphviz command-line tools.

Rendering is best effort: a missing engine or a failed run is logged and
reported as ``False``, never raised.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

DEFAULT_ENGINE = "sfdp"


def render_image(
    dot_path: Union[str, Path],
    image_path: Union[str, Path],
    *,
    engine: str = DEFAULT_ENGINE,
    fmt: str = "png",
    timeout: float = 120.0,
) -> bool:
    """
    Render a DOT file to an image with a Graphviz engine.

    Args:
        dot_path: Input DOT file
        image_path: Output image file
        engine: Graphviz executable to run (default "sfdp")
        fmt: Output format passed as ``-T<fmt>``
        timeout: Seconds to wait for the engine

    Returns:
        True if the image was produced
    """
    executable = shutil.which(engine)
    if executable is None:
        logger.warning("Graphviz engine %r not found on PATH", engine)
        logger.warning("Install Graphviz (e.g. sudo apt-get install graphviz)")
        logger.warning("Manual: %s -T%s %s -o %s", engine, fmt, dot_path, image_path)
        return False

    cmd = [executable, f"-T{fmt}", str(dot_path), "-o", str(image_path)]
    try:
        completed = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("Rendering %s failed: %s", dot_path, exc)
        return False

    if completed.returncode != 0:
        logger.warning(
            "Rendering %s failed (exit %d): %s",
            dot_path,
            completed.returncode,
            completed.stderr.strip(),
        )
        return False

    logger.info("Rendered %s", image_path)
    return True


__all__ = ["DEFAULT_ENGINE", "render_image"]
