"""Tests for the LabelPilot SDK."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from labelpilot import (
    ConfigError,
    FilterCriteria,
    InMemoryCustomLabelStore,
    Label,
    LabelCatalog,
    LabelPilot,
    LabelPilotConfig,
    build_config,
)
from labelpilot.core.providers.dry_run import DryRunLabelProvider
from labelpilot.core.providers.github.provider import GhCliLabelProvider
from labelpilot.sdk import REPO_DETECTION_HINT, resolve_target
from tests.fakes.provider import FakeLabelProvider


def _sdk(catalog: LabelCatalog, provider: FakeLabelProvider, **config: object) -> LabelPilot:
    return LabelPilot(provider=provider, catalog=catalog, config=LabelPilotConfig(target="owner/repo", **config))


def test_build_config_wraps_validation_errors() -> None:
    with pytest.raises(ConfigError, match="invalid config"):
        build_config(target="not-a-repo")


def test_build_config_ignores_none_values() -> None:
    assert build_config(target=None, model=None) == LabelPilotConfig()


@pytest.mark.asyncio
async def test_from_config_uses_bundled_template_and_github_provider() -> None:
    pp = await LabelPilot.from_config(LabelPilotConfig(target="owner/repo"))

    assert len(pp.catalog) == 23
    assert isinstance(pp.provider, GhCliLabelProvider)
    assert pp.target == "owner/repo"
    assert pp.overlay is None


@pytest.mark.asyncio
async def test_from_config_merges_overlay_when_requested(tmp_path: Path) -> None:
    store = InMemoryCustomLabelStore(LabelCatalog({"team": [Label(name="platform", color="123456")]}))
    config = LabelPilotConfig(target="owner/repo", include_custom=True)

    pp = await LabelPilot.from_config(config, provider=FakeLabelProvider(), custom_store=store)

    assert pp.catalog.categories[-1] == "team"
    assert pp.overlay is not None and len(pp.overlay) == 1


@pytest.mark.asyncio
async def test_from_config_loads_explicit_template(tmp_path: Path) -> None:
    template = tmp_path / "labels.json"
    template.write_text(json.dumps({"only": [{"name": "one", "color": "111111"}]}))

    pp = await LabelPilot.from_config(
        LabelPilotConfig(target="owner/repo", template_path=template), provider=FakeLabelProvider()
    )

    assert pp.catalog.categories == ["only"]


@pytest.mark.asyncio
async def test_from_config_wraps_provider_for_dry_run() -> None:
    real = FakeLabelProvider([Label(name="bug", color="000000")])

    pp = await LabelPilot.from_config(LabelPilotConfig(target="owner/repo", dry_run=True), provider=real)
    result = await pp.apply(FilterCriteria.from_strings(label="bug,enhancement"), force=True)

    assert isinstance(pp.provider, DryRunLabelProvider)
    assert result.dry_run
    assert (result.created, result.updated) == (1, 1)
    assert real.create_calls == [] and real.update_calls == []


@pytest.mark.asyncio
async def test_resolve_target_detects_repository(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _detect(self) -> str | None:
        return "acme/site"

    monkeypatch.setattr("labelpilot.sdk.GhClient.detect_repo", _detect)

    assert await resolve_target(LabelPilotConfig()) == "acme/site"


@pytest.mark.asyncio
async def test_resolve_target_raises_when_detection_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _detect(self) -> str | None:
        return None

    monkeypatch.setattr("labelpilot.sdk.GhClient.detect_repo", _detect)

    with pytest.raises(ConfigError) as exc_info:
        await resolve_target(LabelPilotConfig())
    assert str(exc_info.value) == REPO_DETECTION_HINT


@pytest.mark.asyncio
async def test_apply_uses_observed_state(sample_catalog: LabelCatalog) -> None:
    provider = FakeLabelProvider([Label(name="BUG", color="000000")])
    pp = _sdk(sample_catalog, provider)

    result = await pp.apply(FilterCriteria.from_strings(category="type"))

    assert (result.created, result.skipped) == (2, 1)
    assert provider.labels["bug"].color == "000000"


@pytest.mark.asyncio
async def test_wipe_targets_without_criteria_is_everything(sample_catalog: LabelCatalog) -> None:
    provider = FakeLabelProvider([Label(name="bug", color="000000"), Label(name="random", color="000000")])
    pp = _sdk(sample_catalog, provider)

    assert await pp.wipe_targets() == ["bug", "random"]
    assert await pp.wipe_targets(FilterCriteria.from_strings(category="type")) == ["bug"]


@pytest.mark.asyncio
async def test_wipe_deletes_given_targets(sample_catalog: LabelCatalog) -> None:
    provider = FakeLabelProvider([Label(name="bug", color="000000"), Label(name="random", color="000000")])
    pp = _sdk(sample_catalog, provider)

    result = await pp.wipe(["random"])

    assert result.deleted == 1
    assert list(provider.labels) == ["bug"]


@pytest.mark.asyncio
async def test_migrate_produces_a_clean_slate(sample_catalog: LabelCatalog) -> None:
    provider = FakeLabelProvider([Label(name="legacy", color="000000"), Label(name="bug", color="000000")])
    pp = _sdk(sample_catalog, provider)

    result = await pp.migrate()

    assert result.wipe.deleted == 2
    assert result.apply.created == len(sample_catalog)
    assert sorted(provider.labels) == sorted(label.key for label in sample_catalog.all_labels())


@pytest.mark.asyncio
async def test_migrate_uses_supplied_existing_names(sample_catalog: LabelCatalog) -> None:
    provider = FakeLabelProvider([Label(name="legacy", color="000000"), Label(name="keep", color="000000")])
    pp = _sdk(sample_catalog, provider)

    result = await pp.migrate(FilterCriteria.from_strings(label="bug"), existing=["legacy"])

    assert provider.delete_calls == ["legacy"]
    assert result.apply.created == 1
    assert "keep" in provider.labels


@pytest.mark.asyncio
async def test_check_reports_compliance(sample_catalog: LabelCatalog) -> None:
    labels = [label for label in sample_catalog.all_labels() if label.name != "docs"]
    pp = _sdk(sample_catalog, FakeLabelProvider(labels))

    report = await pp.check()

    assert report.missing == 1
    assert not report.compatible
    assert (await pp.check(FilterCriteria.from_strings(exclude="docs"))).compatible


@pytest.mark.asyncio
async def test_create_label_and_save_custom_label(sample_catalog: LabelCatalog) -> None:
    provider = FakeLabelProvider()
    store = InMemoryCustomLabelStore()
    pp = LabelPilot(
        provider=provider,
        catalog=sample_catalog,
        config=LabelPilotConfig(target="owner/repo"),
        custom_store=store,
    )
    label = Label(name="perf", color="abcdef")

    assert await pp.create_label(label)
    pp.save_custom_label("type", label)

    assert "perf" in provider.labels
    assert store.load().labels("type") == (label,)
