"""SDK composition root for labelpilot."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

from labelpilot.core.catalog import CustomLabelStore, JsonCustomLabelStore, load_catalog, load_default_catalog
from labelpilot.core.contracts.config import LabelPilotConfig
from labelpilot.core.contracts.exceptions import ConfigError
from labelpilot.core.contracts.filter import FilterCriteria
from labelpilot.core.contracts.label import Label, LabelCatalog
from labelpilot.core.contracts.provider import LabelProvider
from labelpilot.core.contracts.results import ApplyResult, ComplianceReport, FilterResult, MigrateResult, WipeResult
from labelpilot.core.engine import ComplianceChecker, LabelReconciler, resolve_labels, select_wipe_targets
from labelpilot.core.engine.progress import ReconcileProgress
from labelpilot.core.providers.dry_run import DryRunLabelProvider
from labelpilot.core.providers.factory import create_provider
from labelpilot.core.providers.github.client import GhClient

REPO_DETECTION_HINT = "Could not detect repository. Use --repo <owner/repo> or run inside a git repo."


def build_config(**values: object) -> LabelPilotConfig:
    """Validate raw configuration values, wrapping pydantic failures in ConfigError."""
    try:
        return LabelPilotConfig.model_validate({key: value for key, value in values.items() if value is not None})
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def load_template(config: LabelPilotConfig) -> LabelCatalog:
    """Load the base catalog: an explicit template file, or the bundled one."""
    if config.template_path is not None:
        return load_catalog(config.template_path)
    return load_default_catalog()


async def resolve_target(config: LabelPilotConfig, *, client: GhClient | None = None) -> str:
    if config.target is not None:
        return config.target
    if config.provider != "github":
        return config.provider
    detected = await (client or GhClient()).detect_repo()
    if not detected:
        raise ConfigError(REPO_DETECTION_HINT)
    return detected


class LabelPilot:
    """labelpilot SDK public API.

    Binds one catalog to one repository. Every remote operation opens the
    provider as an async context manager.
    """

    def __init__(
        self,
        *,
        provider: LabelProvider,
        catalog: LabelCatalog,
        config: LabelPilotConfig,
        custom_store: CustomLabelStore | None = None,
        overlay: LabelCatalog | None = None,
        progress: ReconcileProgress | None = None,
    ) -> None:
        self._provider = provider
        self._catalog = catalog
        self._config = config
        self._custom_store = custom_store or JsonCustomLabelStore(config.custom_path)
        self._overlay = overlay
        self._progress = progress

    @classmethod
    async def from_config(
        cls,
        config: LabelPilotConfig,
        *,
        provider: LabelProvider | None = None,
        custom_store: CustomLabelStore | None = None,
        progress: ReconcileProgress | None = None,
    ) -> LabelPilot:
        """Build an SDK instance: load catalogs, resolve the target and pick the provider.

        Raises:
            ConfigError: If the provider is unknown or no repository can be resolved.
            CatalogLoadError: If an explicit template cannot be loaded.
        """
        catalog = load_template(config)
        store = custom_store or JsonCustomLabelStore(config.custom_path)
        overlay: LabelCatalog | None = None
        if config.include_custom:
            overlay = store.load()
            catalog = catalog.merged_with(overlay)

        if provider is None:
            target = await resolve_target(config)
            provider = create_provider(config.provider, target=target)
        if config.dry_run and not isinstance(provider, DryRunLabelProvider):
            provider = DryRunLabelProvider(delegate=provider)

        return cls(
            provider=provider,
            catalog=catalog,
            config=config,
            custom_store=store,
            overlay=overlay,
            progress=progress,
        )

    @property
    def target(self) -> str:
        return self._provider.target

    @property
    def catalog(self) -> LabelCatalog:
        return self._catalog

    @property
    def overlay(self) -> LabelCatalog | None:
        """Overlay catalog merged into :attr:`catalog`, or None when not requested."""
        return self._overlay

    @property
    def provider(self) -> LabelProvider:
        return self._provider

    @property
    def dry_run(self) -> bool:
        return self._config.dry_run

    def resolve(self, criteria: FilterCriteria | None = None) -> FilterResult:
        return resolve_labels(self._catalog, criteria)

    async def list_labels(self) -> list[Label]:
        async with self._provider:
            return await self._provider.list_labels()

    async def list_label_names(self) -> list[str]:
        async with self._provider:
            return await self._provider.list_label_names()

    async def wipe_targets(self, criteria: FilterCriteria | None = None) -> list[str]:
        """Names a wipe would delete.

        Without criteria every observed label is a target; otherwise only the
        filtered desired labels that exist remotely.
        """
        observed = await self.list_label_names()
        if criteria is None or criteria.is_empty:
            return observed
        return select_wipe_targets(self.resolve(criteria).entries, observed)

    async def apply(self, criteria: FilterCriteria | None = None, *, force: bool = False) -> ApplyResult:
        resolved = self.resolve(criteria)
        async with self._provider:
            observed = await self._provider.list_label_names()
            return await self._reconciler().apply(
                resolved.entries,
                observed,
                force=force,
                create=self._provider.create_label,
                update=self._provider.update_label,
            )

    async def wipe(self, targets: Sequence[str]) -> WipeResult:
        async with self._provider:
            return await self._reconciler().wipe(targets, delete=self._provider.delete_label)

    async def migrate(
        self,
        criteria: FilterCriteria | None = None,
        *,
        existing: Sequence[str] | None = None,
    ) -> MigrateResult:
        """Delete every existing label, then create the desired set.

        *existing* is the observed name list shown to the user before
        confirmation; it is fetched when omitted.
        """
        resolved = self.resolve(criteria)
        async with self._provider:
            observed = list(existing) if existing is not None else await self._provider.list_label_names()
            return await self._reconciler().migrate(
                resolved.entries,
                observed,
                create=self._provider.create_label,
                delete=self._provider.delete_label,
            )

    async def check(self, criteria: FilterCriteria | None = None, *, strict: bool = False) -> ComplianceReport:
        resolved = self.resolve(criteria)
        observed = await self.list_labels()
        return ComplianceChecker().check(resolved.entries, observed, strict=strict)

    async def create_label(self, label: Label) -> bool:
        async with self._provider:
            return await self._provider.create_label(label)

    def save_custom_label(self, category: str, label: Label) -> None:
        self._custom_store.save(category, label)

    def _reconciler(self) -> LabelReconciler:
        return LabelReconciler(progress=self._progress, dry_run=self._config.dry_run)
