"""Metadata provider backed by a JSONL manifest from an offline scan.

Each line is one record with a ``type`` of ``capabilities``, ``class``,
``enum`` or ``service``. The capabilities record is the explicit check
for whether the backend uses the remoting framework; without it the
whole run is not applicable.
"""
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..errors import MalformedMetadataError
from ..models import (
    ManifestRecord, CapabilitiesRecord, ClassMetadata, EnumMetadata, ServiceMetadata,
)
from ..storage import read_jsonl, write_jsonl
from .provider import StaticMetadataProvider

RECORD_TYPES = {"capabilities", "class", "enum", "service"}

_record_adapter = TypeAdapter(ManifestRecord)


class ManifestMetadataProvider(StaticMetadataProvider):
    """Load scanned types from a manifest file.

    The file is read on first use, so a run that is skipped never touches it.
    """

    def __init__(self, manifest_path: Path):
        super().__init__(available=False)
        self.manifest_path = manifest_path
        self.warnings: list[str] = []
        self._loaded = False

    def load(self) -> "ManifestMetadataProvider":
        """Read and validate the manifest (once).

        Raises:
            MalformedMetadataError: If the file is missing or a record is invalid.
        """
        if self._loaded:
            return self

        classes: list[ClassMetadata] = []
        enums: list[EnumMetadata] = []
        services: list[ServiceMetadata] = []
        available = False

        for record in self._load_records():
            if isinstance(record, CapabilitiesRecord):
                available = record.available
            elif isinstance(record, ClassMetadata):
                classes.append(record)
            elif isinstance(record, EnumMetadata):
                enums.append(record)
            elif isinstance(record, ServiceMetadata):
                services.append(record)

        super().__init__(classes, enums, services, available=available)
        self._loaded = True
        return self

    def supports_remoting(self) -> bool:
        self.load()
        return super().supports_remoting()

    def classes(self) -> list[ClassMetadata]:
        self.load()
        return super().classes()

    def enum_types(self) -> list[EnumMetadata]:
        self.load()
        return super().enum_types()

    def service_types(self) -> list[ServiceMetadata]:
        self.load()
        return super().service_types()

    def find_class(self, qualified_name: str) -> Optional[ClassMetadata]:
        self.load()
        return super().find_class(qualified_name)

    def _load_records(self) -> list:
        if not self.manifest_path.exists():
            raise MalformedMetadataError(f"Manifest not found: {self.manifest_path}")

        records = []
        lineno = 0
        try:
            for lineno, data in read_jsonl(self.manifest_path):
                kind = data.get("type") if isinstance(data, dict) else None
                if kind not in RECORD_TYPES:
                    self.warnings.append(
                        f"{self.manifest_path.name}:{lineno}: unknown record type {kind!r}, ignored"
                    )
                    continue
                records.append(_record_adapter.validate_python(data))
        except ValidationError as e:
            raise MalformedMetadataError(
                f"{self.manifest_path}:{lineno}: invalid {kind} record:\n{e}"
            ) from e
        except ValueError as e:
            raise MalformedMetadataError(str(e)) from e
        return records


def save_manifest(path: Path, records: list) -> None:
    """Write metadata records as a manifest (used by scanners and fixtures)."""
    write_jsonl(path, records)
