"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

from dataclasses import dataclass

from rcli.app import CsvService, TextService
from rcli.app.adapters import FileSystemStorageAdapter, get_signer
from rcli.app.ports import StoragePort
from rcli.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    storage_port: StoragePort
    text_service: TextService
    csv_service: CsvService


def bootstrap_application(settings: Settings | None = None) -> ApplicationContainer:
    """Instantiate adapters and services for CLI consumption."""

    active_settings = settings or get_settings()

    storage = FileSystemStorageAdapter()

    text_service = TextService(
        storage_port=storage,
        signer_factory=get_signer,
        default_format=active_settings.default_sign_format,
        key_dir_factory=active_settings.get_key_dir,
    )
    csv_service = CsvService(storage_port=storage)

    return ApplicationContainer(
        settings=active_settings,
        storage_port=storage,
        text_service=text_service,
        csv_service=csv_service,
    )
