# lessondocx/progress.py
from abc import ABC, abstractmethod


class ProgressCallback(ABC):
    """Receives events while a lesson document is assembled.

    Blocks are the text and table regions found by the segmenter; the cover
    page and signature footer are not counted among them.
    """

    @abstractmethod
    def on_start(self, total_blocks: int) -> None:
        pass

    @abstractmethod
    def on_block_processed(self, block_number: int) -> None:
        """block_number is 1-based and follows document order."""

    @abstractmethod
    def on_finish(self, filename: str) -> None:
        """filename is the download name for run() or the written path for save()."""

    def update(self, message: str) -> None:
        """
        Status note outside the block count

        Args:
            message: e.g. "Cover page added" once the header page is in place
        """
