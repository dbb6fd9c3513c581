from .scanner import COMMENT_MARKER, scan_blocks

__all__ = ["scan_blocks", "COMMENT_MARKER"]
