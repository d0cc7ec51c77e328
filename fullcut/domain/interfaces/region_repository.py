"""
Interface for the Region Repository - defines the contract for storing marked regions.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from fullcut.domain.models import RegionSet


class IRegionRepository(ABC):
    """
    Repository interface for persisting the regions of a source file.
    The source audio itself is never written.
    """

    @abstractmethod
    def save(self, source_path: Path, region_set: RegionSet, duration: float) -> bool:
        """
        Store regions for a source file.

        Args:
            source_path: Audio file the regions belong to
            region_set: Regions to store
            duration: Source duration in seconds

        Returns:
            True if stored
        """
        pass

    @abstractmethod
    def load(self, source_path: Path) -> Optional[RegionSet]:
        """
        Load stored regions for a source file.

        Args:
            source_path: Audio file

        Returns:
            RegionSet or None when nothing is stored
        """
        pass

    @abstractmethod
    def exists(self, source_path: Path) -> bool:
        """
        Check whether regions are stored for a source file.

        Args:
            source_path: Audio file

        Returns:
            True if stored
        """
        pass

    @abstractmethod
    def list_entries(self) -> List[str]:
        """
        List stored entries.

        Returns:
            Source hashes with stored regions
        """
        pass

    @abstractmethod
    def delete(self, source_path: Path) -> bool:
        """
        Remove stored regions for a source file.

        Args:
            source_path: Audio file

        Returns:
            True if something was removed
        """
        pass
