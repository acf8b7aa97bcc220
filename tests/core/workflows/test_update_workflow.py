"""Tests for the update workflow."""

import shutil
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from onecode_linux.core.backup import (
    BackupOutcome,
    BackupStatus,
    RestoreOutcome,
    RestoreStatus,
)
from onecode_linux.core.workflows import (
    UpdateWorkflow,
    WorkflowContext,
    WorkflowStatus,
)
from onecode_linux.exceptions import DependencyError, UpdateError


def _workflow(context: WorkflowContext) -> UpdateWorkflow:
    return UpdateWorkflow(context, check_installer=False)


@pytest.mark.asyncio
async def test_update_to_newer_tag(
    context: WorkflowContext, seed_settings, global_config: dict
) -> None:
    """A newer tag is checked out, settings backed up, app rebuilt."""
    seed_settings()

    status = await _workflow(context).run()

    assert status is WorkflowStatus.COMPLETED
    context.repository.fetch.assert_awaited_once()
    context.repository.checkout.assert_awaited_once_with("v0.0.24")
    context.builder.build.assert_awaited_once()
    context.installer.install.assert_awaited_once()
    backup_root = global_config["directory"]["backup"]
    backups = context.backups.list_backups(backup_root)
    assert len(backups) == 1


@pytest.mark.asyncio
async def test_not_installed(context: WorkflowContext) -> None:
    """Updating without a checkout is an error."""
    context.repository.is_cloned.return_value = False

    with pytest.raises(UpdateError, match="not installed"):
        await _workflow(context).run()

    context.dependencies.scan.assert_not_awaited()


@pytest.mark.asyncio
async def test_up_to_date_and_rebuild_declined(
    context: WorkflowContext,
) -> None:
    """Declining a rebuild when current builds nothing."""
    context.repository.current_tag.return_value = "v0.0.24"

    status = await _workflow(context).run()

    assert status is WorkflowStatus.CANCELLED
    context.prompter.confirm.assert_called_once_with(
        "Rebuild anyway?", default=False
    )
    context.repository.checkout.assert_not_awaited()
    context.builder.build.assert_not_awaited()


@pytest.mark.asyncio
async def test_up_to_date_and_rebuild_accepted(
    context: WorkflowContext,
) -> None:
    """Accepting a rebuild builds without a checkout."""
    context.repository.current_tag.return_value = "v0.0.24"
    context.prompter.confirm.side_effect = lambda question, *, default: True

    status = await _workflow(context).run()

    assert status is WorkflowStatus.COMPLETED
    context.repository.checkout.assert_not_awaited()
    context.builder.build.assert_awaited_once()


@pytest.mark.asyncio
async def test_dirty_tree_declined(context: WorkflowContext) -> None:
    """Refusing to stash aborts the update."""
    context.repository.is_dirty.return_value = True

    with pytest.raises(UpdateError, match="uncommitted changes"):
        await _workflow(context).run()

    context.repository.stash.assert_not_awaited()
    context.builder.build.assert_not_awaited()


@pytest.mark.asyncio
async def test_dirty_tree_stashed(context: WorkflowContext) -> None:
    """Accepting the stash keeps local changes and continues."""
    context.repository.is_dirty.return_value = True
    context.prompter.confirm.side_effect = lambda question, *, default: True

    await _workflow(context).run()

    context.repository.stash.assert_awaited_once_with(
        "Auto-stash before update to v0.0.24"
    )
    context.repository.checkout.assert_awaited_once_with("v0.0.24")


@pytest.mark.asyncio
async def test_backup_failure_declined_aborts(
    context: WorkflowContext, seed_settings
) -> None:
    """A failed backup stops the update when the user says no."""
    seed_settings()
    context.backups = MagicMock()
    context.backups.create_backup.return_value = BackupOutcome(
        BackupStatus.COPY_FAILED, path=Path("/b"), message="copy failed"
    )
    context.prompter.confirm.side_effect = lambda question, *, default: False

    status = await _workflow(context).run()

    assert status is WorkflowStatus.CANCELLED
    context.prompter.confirm.assert_called_once_with(
        "Continue without a settings backup?", default=True
    )
    context.builder.build.assert_not_awaited()


@pytest.mark.asyncio
async def test_settings_lost_offers_restore(
    context: WorkflowContext, seed_settings, global_config: dict
) -> None:
    """Settings wiped by the install are restored from a backup."""
    settings = seed_settings()

    async def wipe_settings() -> None:
        shutil.rmtree(settings)

    context.builder.build.side_effect = wipe_settings

    status = await _workflow(context).run()

    assert status is WorkflowStatus.COMPLETED
    context.prompter.choose.assert_called_once()
    question, options = context.prompter.choose.call_args.args
    assert question == "Restore settings from which backup?"
    assert len(options) == 1
    assert (settings / "data" / "agents.db").stat().st_size == 500


@pytest.mark.asyncio
async def test_failed_restore_is_unverified(
    context: WorkflowContext,
    seed_settings,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A restore that fails after the install is not reported as success."""
    settings = seed_settings()

    async def wipe_settings() -> None:
        shutil.rmtree(settings)

    context.builder.build.side_effect = wipe_settings
    failed = RestoreOutcome(
        RestoreStatus.COPY_FAILED,
        backup_path=Path("/b"),
        settings_dir=settings,
        message="copy failed",
    )

    with patch.object(
        context.backups, "restore_backup", return_value=failed
    ) as restore:
        status = await _workflow(context).run()

    assert status is WorkflowStatus.UNVERIFIED
    restore.assert_called_once()
    assert not (settings / "data" / "agents.db").exists()
    assert "Update successful" not in caplog.text
    assert "Settings could not be restored" in caplog.text


@pytest.mark.asyncio
async def test_settings_lost_without_backups(
    context: WorkflowContext,
) -> None:
    """With no settings and no backups nothing is offered."""
    status = await _workflow(context).run()

    assert status is WorkflowStatus.COMPLETED
    context.prompter.choose.assert_not_called()


@pytest.mark.asyncio
async def test_missing_app_is_unverified(
    context: WorkflowContext, seed_settings
) -> None:
    """A missing application binary reports an unverified update."""
    seed_settings()
    context.installer.install = AsyncMock()

    status = await _workflow(context).run()

    assert status is WorkflowStatus.UNVERIFIED


@pytest.mark.asyncio
async def test_missing_dependencies_stop_update(
    context: WorkflowContext,
) -> None:
    """DependencyError from the checker propagates."""
    context.dependencies.require.side_effect = DependencyError(["bun"])

    with pytest.raises(DependencyError):
        await _workflow(context).run()

    context.repository.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_installer_update_notice(
    context: WorkflowContext,
    seed_settings,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A newer installer release is announced but not installed."""
    seed_settings()
    check = AsyncMock(return_value="v9.0.0")
    with patch(
        "onecode_linux.core.workflows.update.check_for_self_update", check
    ):
        await UpdateWorkflow(context).run()

    check.assert_awaited_once_with("owner/installer", 5)
    assert "v9.0.0 is available" in caplog.text
