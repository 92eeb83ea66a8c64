import struct
from pathlib import Path

from fbx4vrm_reporter.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def load_screenshot(path: str | Path) -> bytes:
    """
    Best-effort read of a captured image. Returns b"" when the file cannot be read
    so a report can still be sent without its screenshot.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        logger.warning(f"Could not load screenshot {path}: {e}")
        return b""


def png_dimensions(data: bytes) -> tuple[int, int]:
    """Width and height from the PNG IHDR chunk, (0, 0) for anything else."""
    if len(data) < 24 or not data.startswith(PNG_SIGNATURE) or data[12:16] != b"IHDR":
        return 0, 0
    width, height = struct.unpack(">II", data[16:24])
    return width, height
