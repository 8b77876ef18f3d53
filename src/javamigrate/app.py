"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import ExitStack
from logging import getLogger
from typing import TYPE_CHECKING

from javamigrate.adapters.foojay import FoojayClient, default_foojay_config
from javamigrate.adapters.sdkman import SdkmanClient
from javamigrate.config import get_sdkman_config
from javamigrate.domain.reconciliation import Reconciler, ReconcileSettings

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from javamigrate.config import FoojayConfig, SdkmanConfig
    from javamigrate.domain.ports import ReleaseCatalog, ReleaseRegistry
    from javamigrate.domain.types import ReconcileResult


log = getLogger(__name__)


def settings_from_config(foojay: FoojayConfig, sdkman: SdkmanConfig) -> ReconcileSettings:
    return ReconcileSettings(
        catalog_url=foojay.url,
        broker_url=sdkman.broker_url,
        release_url=sdkman.release_url,
    )


def settings_from_environment() -> ReconcileSettings:
    return settings_from_config(default_foojay_config(), get_sdkman_config())


def migrate_java_release(
    query_params: Mapping[str, Sequence[str]],
    *,
    default_candidate: bool = False,
    catalog: ReleaseCatalog | None = None,
    registry: ReleaseRegistry | None = None,
    settings: ReconcileSettings | None = None,
) -> ReconcileResult:
    """Publish the newest Foojay release matching ``query_params`` to SDKMAN.

    Missing ports and settings are built from one read of the environment.
    Adapters created here are closed before returning; injected ones are not.
    """

    with ExitStack() as stack:
        if settings is None or catalog is None or registry is None:
            foojay_config = default_foojay_config()
            sdkman_config = get_sdkman_config()
            if settings is None:
                settings = settings_from_config(foojay_config, sdkman_config)
            if catalog is None:
                catalog = stack.enter_context(FoojayClient(config=foojay_config))
            if registry is None:
                registry = stack.enter_context(SdkmanClient(config=sdkman_config))

        reconciler = Reconciler(catalog=catalog, registry=registry, settings=settings)
        log.info(
            "Starting Java migration: params=%s, default_candidate=%s",
            dict(query_params),
            default_candidate,
        )

        result = reconciler.execute(query_params, default_candidate)

    log.info(
        f"Finished Java migration: outcome={result.outcome}, "
        f"version={result.version_with_vendor}, response={result.response}"
    )
    return result
