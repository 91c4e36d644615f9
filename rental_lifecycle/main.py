"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import uvicorn

from rental_lifecycle.bootstrap import bootstrap_create_application, bootstrap_create_storage
from rental_lifecycle.config import config_configure_logging, config_load_settings


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when `storage-check` finds storage unreachable.
    """

    argument_parser = argparse.ArgumentParser(description="Rental lifecycle runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "storage-check"),
        help="Runtime command: `api` starts server, `storage-check` verifies storage connectivity and exits",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()

    if parsed_arguments.command == "storage-check":
        config_configure_logging(log_level=settings.log_level, log_format=settings.log_format)
        storage = bootstrap_create_storage(settings)
        try:
            storage_health = storage.db_health_service.db_check_health()
        except ConnectionError as error:
            print("STORAGE_DOWN:", storage.db_health_service.db_connection_label(), str(error))
            raise SystemExit(1) from error
        print("STORAGE_OK:", storage.db_health_service.db_connection_label(), storage_health.detail)
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
