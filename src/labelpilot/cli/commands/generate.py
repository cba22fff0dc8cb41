"""Generate command handlers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from labelpilot import (
    ConfigError,
    GitHubModelsSuggester,
    Label,
    LabelPilotConfig,
    SuggestionError,
    SuggestionRequest,
    create_token_resolver,
)

SUGGESTION_COUNT = 3

CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "type": "Classify what kind of work this is",
    "status": "Track the current workflow state",
    "community": "Signals for open source contributors",
    "resolution": "Why an issue or PR was closed",
    "area": "Broad software layers",
}


def create_suggester(config: LabelPilotConfig) -> GitHubModelsSuggester:
    return GitHubModelsSuggester(token_resolver=create_token_resolver(config), model=config.model)


def format_suggestions(suggestions: Sequence[Label]) -> str:
    lines = [""]
    for index, label in enumerate(suggestions, start=1):
        lines.append(f"  [{index}] {label.name} #{label.color} - {label.description}")
    lines.append("")
    return "\n".join(lines)


def resolve_category(requested: str | None, categories: Sequence[str]) -> str | None:
    """Validate a ``--category`` value; None means ask interactively."""
    if requested is None:
        return None
    candidate = requested.strip().lower()
    for category in categories:
        if category.lower() == candidate:
            return category
    raise ConfigError(f'Unknown category "{requested}". Valid categories: {", ".join(categories)}')


async def choose_label(
    suggester: GitHubModelsSuggester,
    *,
    category: str,
    description: str,
    existing: Sequence[Label],
) -> Label:
    """Run the suggestion loop until the user picks one label."""
    import labelpilot.cli as cli

    refinement: str | None = None
    attempt = 1
    while True:
        print("Regenerating with your feedback..." if refinement else "Generating label suggestions...")
        request = SuggestionRequest(
            category=category,
            description=description,
            count=SUGGESTION_COUNT,
            refinement=refinement,
            attempt=attempt,
            existing=tuple(existing),
        )
        try:
            suggestions = await suggester.suggest(request)
        except SuggestionError as exc:
            print(f"error: Failed to generate labels: {exc}", file=sys.stderr)
            if not await cli.confirm_prompt("Would you like to try again?", default=True):
                raise
            refinement = None
            attempt = 1
            continue

        if not suggestions:
            print("warning: No valid suggestions received. Let's try again.", file=sys.stderr)
            attempt += 1
            continue

        print(cli._format_suggestions(suggestions))
        choices = [(f"{label.name} - {label.description}", f"pick:{index}") for index, label in enumerate(suggestions)]
        choices += [("Refine suggestions", "refine"), ("Regenerate", "regenerate")]
        choice = await cli.select_prompt("Pick a label or refine:", choices)

        if choice == "refine":
            refinement = await cli.text_prompt(
                "What would you like to change?",
                validate=cli.require_text("Please provide feedback."),
            )
            attempt += 1
            continue
        if choice == "regenerate":
            refinement = None
            attempt += 1
            continue
        return suggestions[int(choice.removeprefix("pick:"))]


async def run_generate(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    config = cli.config_from_args(args)
    catalog = cli.load_template(config)

    category = resolve_category(args.category, catalog.categories)
    if category is None:
        category = await cli.select_prompt(
            "Select a label category:",
            [
                (f"{name} - {CATEGORY_DESCRIPTIONS[name]}" if name in CATEGORY_DESCRIPTIONS else name, name)
                for name in catalog.categories
            ],
        )

    print(f"Generating {category} label (model: {config.model})")
    description = await cli.text_prompt(
        "Describe the label you need:",
        validate=cli.require_text("Please provide a description."),
    )

    suggester = cli.create_suggester(config)
    label = await choose_label(suggester, category=category, description=description, existing=catalog.labels(category))

    cli.JsonCustomLabelStore(config.custom_path).save(category, label)
    print(f'Saved "{label.name}" to {config.custom_path} under [{category}]')

    if await cli.confirm_prompt("Apply this label to a repo now?", default=False):
        pp = await cli.LabelPilot.from_config(config)
        print(f"Target: {pp.target}")
        if await pp.create_label(label):
            print(f"✔ {label.name} (created)")
        else:
            print(f"✘ {label.name} (create failed)", file=sys.stderr)

    print()
    print("Tip: Use `labelpilot apply --custom` to apply all your custom labels.")
    return 0


__all__ = ["choose_label", "create_suggester", "format_suggestions", "resolve_category", "run_generate"]
