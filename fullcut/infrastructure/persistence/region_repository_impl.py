"""
JsonRegionRepository - JSON sidecar persistence for marked regions.
"""

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from config import APP, REGIONS_DIR
from fullcut.domain.interfaces import IRegionRepository
from fullcut.domain.models import RegionSet

logger = logging.getLogger(__name__)


class JsonRegionRepository(IRegionRepository):
    """
    Implementation of IRegionRepository using one JSON file per source.

    Entries are keyed by the MD5 hash of the source file, so a renamed or
    moved file still finds its regions, and an edited file does not pick up
    stale ones.
    """

    def __init__(self, regions_folder: Optional[Path] = None):
        """
        Args:
            regions_folder: Folder for sidecar files (default: per-user data dir)
        """
        self.regions_folder = Path(regions_folder) if regions_folder is not None else REGIONS_DIR
        logger.info(f"JsonRegionRepository initialized: {self.regions_folder}")

    def save(self, source_path: Path, region_set: RegionSet, duration: float) -> bool:
        """Store regions for a source file."""
        source_path = Path(source_path)
        try:
            source_hash = self.calculate_file_hash(source_path)
        except OSError as e:
            logger.error(f"Cannot hash source {source_path}: {e}")
            return False

        region_file = self._get_region_file(source_hash)
        backup_file = region_file.with_name(region_file.name + APP.Regions.BACKUP_SUFFIX)

        data = {
            "format_version": APP.Regions.FORMAT_VERSION,
            "source_name": source_path.name,
            "source_hash": source_hash,
            "duration": float(duration),
            "regions": region_set.to_list(),
            "last_modified": datetime.now().isoformat(),
        }

        try:
            self.regions_folder.mkdir(parents=True, exist_ok=True)

            # Backup existing file
            if region_file.exists():
                region_file.replace(backup_file)

            with open(region_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)

            logger.debug(f"Regions saved: {region_file} ({len(region_set)} regions)")
            return True

        except OSError as e:
            logger.error(f"Failed to save regions for {source_path.name}: {e}")

            # Restore from backup
            if backup_file.exists():
                backup_file.replace(region_file)
                logger.info("Restored regions from backup after save failure")

            return False

    def load(self, source_path: Path) -> Optional[RegionSet]:
        """Load stored regions for a source file."""
        source_path = Path(source_path)
        try:
            region_file = self._get_region_file(self.calculate_file_hash(source_path))
        except OSError as e:
            logger.error(f"Cannot hash source {source_path}: {e}")
            return None

        if not region_file.exists():
            logger.debug(f"No stored regions for {source_path.name}")
            return None

        try:
            with open(region_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            region_set = RegionSet.from_list(data.get("regions", []))
            logger.info(f"Loaded {len(region_set)} stored regions for {source_path.name}")
            return region_set

        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to load regions from {region_file}: {e}")
            return None

    def exists(self, source_path: Path) -> bool:
        """Check whether regions are stored for a source file."""
        try:
            return self._get_region_file(self.calculate_file_hash(Path(source_path))).exists()
        except OSError:
            return False

    def list_entries(self) -> List[str]:
        """Return source hashes with stored regions."""
        if not self.regions_folder.exists():
            return []

        suffix = APP.Regions.FILE_SUFFIX
        return sorted(p.name[:-len(suffix)] for p in self.regions_folder.glob(f"*{suffix}"))

    def delete(self, source_path: Path) -> bool:
        """Remove stored regions for a source file."""
        try:
            region_file = self._get_region_file(self.calculate_file_hash(Path(source_path)))
        except OSError:
            return False

        if not region_file.exists():
            return False

        try:
            region_file.unlink()
            logger.info(f"Deleted stored regions: {region_file.name}")
            return True
        except OSError as e:
            logger.error(f"Failed to delete {region_file}: {e}")
            return False

    @staticmethod
    def calculate_file_hash(file_path: Path) -> str:
        """
        MD5 hash of a file.

        Args:
            file_path: Path to the file

        Returns:
            MD5 hash as a hex string

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File does not exist: {file_path}")

        hash_md5 = hashlib.md5()
        with open(file_path, "rb") as f:
            # Read in blocks to save memory
            while chunk := f.read(APP.Regions.HASH_CHUNK_SIZE):
                hash_md5.update(chunk)

        return hash_md5.hexdigest()

    def _get_region_file(self, source_hash: str) -> Path:
        """Return the sidecar path for a hash."""
        return APP.Paths.get_region_file(self.regions_folder, source_hash)
