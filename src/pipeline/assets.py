"""Asset Collector - observes the runtime's asset-loading hook."""

from typing import Any

from core import get_logger
from document.models import AssetRecord
from runtime import read
from runtime.protocols import FileAsset

logger = get_logger(__name__)

UNNAMED_ASSET = "Unnamed Asset"


class AssetCollector:
    """
    Asset-loading hook that only records what it sees.

    Always returns False so the runtime goes on with its default loading.
    """

    def __init__(self) -> None:
        self.records: list[AssetRecord] = []

    def __call__(self, asset: FileAsset | None = None, *args: Any) -> bool:
        if asset is None:
            return False
        record = AssetRecord(
            name=str(read(asset, "name") or UNNAMED_ASSET),
            cdn_uuid=str(read(asset, "cdn_uuid") or ""),
        )
        self.records.append(record)
        logger.debug("asset_observed", asset=record.name, cdn_uuid=record.cdn_uuid)
        return False

    def __len__(self) -> int:
        return len(self.records)
