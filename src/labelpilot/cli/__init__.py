"""Command-line interface for labelpilot."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from labelpilot import JsonCustomLabelStore as JsonCustomLabelStore
from labelpilot import LabelPilot as LabelPilot
from labelpilot import fetch_latest_version as fetch_latest_version
from labelpilot import is_newer_version as is_newer_version
from labelpilot import load_template as load_template
from labelpilot.cli.app import main as main
from labelpilot.cli.commands import apply as apply_command
from labelpilot.cli.commands import check as check_command
from labelpilot.cli.commands import generate as generate_command
from labelpilot.cli.commands import list_labels as list_command
from labelpilot.cli.commands import migrate as migrate_command
from labelpilot.cli.commands import update as update_command
from labelpilot.cli.commands import wipe as wipe_command
from labelpilot.cli.common import config_from_args as config_from_args
from labelpilot.cli.common import criteria_from_args as criteria_from_args
from labelpilot.cli.common import plural as plural
from labelpilot.cli.common import print_catalog_notes as print_catalog_notes
from labelpilot.cli.common import print_warnings as print_warnings
from labelpilot.cli.parser import _package_version as _package_version
from labelpilot.cli.parser import build_parser as build_parser
from labelpilot.cli.progress.rich import RichReconcileReporter as RichReconcileReporter
from labelpilot.cli.prompts import confirm_prompt as confirm_prompt
from labelpilot.cli.prompts import require_text as require_text
from labelpilot.cli.prompts import select_prompt as select_prompt
from labelpilot.cli.prompts import text_prompt as text_prompt
from labelpilot.core.release import run_upgrade as run_upgrade
from labelpilot.core.release import upgrade_command as upgrade_command

_format_apply_summary = apply_command.format_apply_summary
_format_wipe_summary = wipe_command.format_wipe_summary
_format_migrate_summary = migrate_command.format_migrate_summary
_format_check_report = check_command.format_check_report
_format_label_list = list_command.format_label_list
_format_suggestions = generate_command.format_suggestions

create_suggester = generate_command.create_suggester

_run_apply = apply_command.run_apply
_run_wipe = wipe_command.run_wipe
_run_migrate = migrate_command.run_migrate
_run_check = check_command.run_check
_run_list = list_command.run_list
_run_generate = generate_command.run_generate
_run_update = update_command.run_update
