"""Developer CLI for the training-program generator.

Runs the same create_training_program path the onboarding flow uses, from
command-line options or a JSON profile file, and prints the result.
"""

import json
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fitplan.core.logger import setup_logger
from fitplan.training.catalog.catalog import get_catalog
from fitplan.training.enums import (
    ActivityFrequency,
    ExperienceLevel,
    MuscleGroup,
    RedistributionStrategy,
    TrainingGoal,
    TrainingStyle,
    TrainingTime,
)
from fitplan.training.errors import WorkoutGenerationError
from fitplan.training.models import UserProfile
from fitplan.training.program import create_training_program, generate_workout_days
from fitplan.training.styles import determine_training_style

console = Console()

app = typer.Typer(
    name="fitplan",
    help="fitplan CLI - generate and inspect training programs",
    add_completion=False,
)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit JSON log records on stderr"),
) -> None:
    """Configure logging for every command."""
    setup_logger(level="DEBUG" if debug else None, log_file=log_file, json_logs=json_logs)


def _parse_days(days: str | None) -> list[int]:
    if not days:
        return []
    try:
        return [int(part) for part in days.split(",") if part.strip()]
    except ValueError as e:
        raise typer.BadParameter(f"days must be comma-separated weekday numbers, got '{days}'") from e


def _load_profile(
    profile_file: Path | None,
    experience: ExperienceLevel | None,
    goal: TrainingGoal | None,
    frequency: ActivityFrequency | None,
    days: str | None,
    style: TrainingStyle | None,
    time: TrainingTime | None,
) -> UserProfile:
    """Build a profile from a JSON file, with command-line options taking precedence."""
    data: dict = {}
    if profile_file is not None:
        try:
            data = json.loads(profile_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise typer.BadParameter(f"cannot read profile file {profile_file}: {e}") from e

    overrides = {
        "experience": experience,
        "goal": goal,
        "activity_frequency": frequency,
        "training_style": style,
        "training_time": time,
    }
    if days is not None:
        overrides["training_days"] = _parse_days(days)
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return UserProfile.model_validate(data)
    except ValidationError as e:
        console.print(Panel(Text(str(e), style="red"), title="Invalid profile", border_style="red"))
        raise typer.Exit(2) from e


ProfileOption = typer.Option(None, "--profile", "-p", help="JSON profile file (onboarding keys accepted)")
ExperienceOption = typer.Option(None, "--experience", "-e", help="Training experience")
GoalOption = typer.Option(None, "--goal", "-g", help="Training goal")
FrequencyOption = typer.Option(None, "--frequency", "-f", help="Prior activity frequency")
DaysOption = typer.Option(None, "--days", "-d", help="Training weekdays, e.g. 1,3,5")
StyleOption = typer.Option(None, "--style", help="Preferred training style")
TimeOption = typer.Option(None, "--time", "-t", help="Session time budget")


@app.command()
def generate(
    profile_file: Path | None = ProfileOption,
    experience: ExperienceLevel | None = ExperienceOption,
    goal: TrainingGoal | None = GoalOption,
    frequency: ActivityFrequency | None = FrequencyOption,
    days: str | None = DaysOption,
    style: TrainingStyle | None = StyleOption,
    time: TrainingTime | None = TimeOption,
    strategy: RedistributionStrategy | None = typer.Option(None, "--strategy", help="Redistribution strategy"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the program JSON to a file"),
) -> None:
    """Generate a training program and print it as JSON."""
    profile = _load_profile(profile_file, experience, goal, frequency, days, style, time)

    try:
        program = create_training_program(profile, strategy=strategy)
    except WorkoutGenerationError as e:
        console.print(Panel(Text("Couldn't build the training plan", style="bold red"), subtitle=str(e), border_style="red"))
        raise typer.Exit(1) from e

    payload = program.model_dump_json(by_alias=True, indent=2)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
        logger.info(f"Program written to {output}")
        console.print(f"[green]Program {program.id} written to {output}[/green]")
        return

    console.print(JSON(payload))


@app.command()
def validate(
    profile_file: Path | None = ProfileOption,
    experience: ExperienceLevel | None = ExperienceOption,
    goal: TrainingGoal | None = GoalOption,
    frequency: ActivityFrequency | None = FrequencyOption,
    days: str | None = DaysOption,
    style: TrainingStyle | None = StyleOption,
    time: TrainingTime | None = TimeOption,
) -> None:
    """Generate a week without repair and list its validation issues."""
    profile = _load_profile(profile_file, experience, goal, frequency, days, style, time)

    try:
        week, result = generate_workout_days(profile)
    except WorkoutGenerationError as e:
        console.print(Panel(Text("Couldn't build the training plan", style="bold red"), subtitle=str(e), border_style="red"))
        raise typer.Exit(1) from e

    console.print(f"Style: [bold]{determine_training_style(profile).value}[/bold], days: {len(week)}")
    if result.is_valid:
        console.print(Panel(Text("Week is valid", style="bold green"), border_style="green"))
        return

    table = Table(title="Validation issues")
    table.add_column("Type")
    table.add_column("Muscle")
    table.add_column("Days")
    table.add_column("Message")
    for issue in result.issues:
        table.add_row(issue.type.value, issue.muscle, ",".join(str(d) for d in issue.days), issue.message)
    console.print(table)


@app.command()
def catalog(
    muscle: MuscleGroup = typer.Argument(..., help="Muscle group"),
    level: ExperienceLevel = typer.Option(ExperienceLevel.BEGINNER, "--level", "-l", help="Experience level"),
) -> None:
    """List catalog exercises for a muscle group and level, best first."""
    rows = get_catalog().exercises_for_level(muscle, level)

    table = Table(title=f"{muscle.value} ({level.value})")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Priority", justify="right")
    table.add_column("Equipment")
    for record in rows:
        table.add_row(
            record.id,
            record.name,
            "compound" if record.compound else "isolation",
            str(record.priority),
            ", ".join(eq.value for eq in record.equipment),
        )
    console.print(table)


if __name__ == "__main__":
    app()
