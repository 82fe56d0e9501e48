"""
CLI interface for trailsplit.

Usage:
    python -m trailsplit.cli segments route.gpx --split 120 --split 340:hotel
    python -m trailsplit.cli export route.gpx --split 120 --output-dir ./projects
    python -m trailsplit.cli show trail-project-2024-06-01.json
    python -m trailsplit.cli settings --fitness 3 --backpack 10
"""

import logging
import sys
from pathlib import Path

import click

from trailsplit.config import settings
from trailsplit.features.effort import EffortSettings, SettingsRepository
from trailsplit.features.gpx import parse_gpx
from trailsplit.features.project import project_filename
from trailsplit.features.segmentation import SegmentationEngine, SegmentReport
from trailsplit.shared.constants import MarkerType
from trailsplit.shared.exceptions import TrailSplitError
from trailsplit.shared.formatters import format_distance_km, format_elevation, format_time_hours

logger = logging.getLogger(__name__)

MARKER_TYPE_NAMES = [t.value for t in MarkerType]


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def _parse_split(value: str) -> tuple[int, MarkerType]:
    """'120' -> (120, split), '340:hotel' -> (340, hotel)."""
    index_part, _, type_part = value.partition(":")
    try:
        index = int(index_part)
    except ValueError:
        raise click.BadParameter(f"'{value}': point index must be an integer")

    if not type_part:
        return index, MarkerType.SPLIT
    try:
        return index, MarkerType(type_part.lower())
    except ValueError:
        raise click.BadParameter(
            f"'{value}': marker type must be one of {', '.join(MARKER_TYPE_NAMES)}"
        )


def _effort_settings(
    settings_file: Path,
    fitness: int | None,
    backpack: float | None
) -> EffortSettings:
    """Stored settings with one-off command-line overrides."""
    effort = SettingsRepository(settings_file).get()
    overrides = {}
    if fitness is not None:
        overrides["fitness_level"] = fitness
    if backpack is not None:
        overrides["backpack_weight_kg"] = backpack
    return effort.model_copy(update=overrides) if overrides else effort


def _build_engine(
    gpx_file: Path,
    splits: tuple[str, ...],
    effort: EffortSettings
) -> SegmentationEngine:
    engine = SegmentationEngine(effort)
    engine.load_track(parse_gpx(gpx_file.read_bytes()))
    for value in splits:
        index, marker_type = _parse_split(value)
        engine.add_marker(index, marker_type)
    return engine


def _report_line(title: str, report: SegmentReport) -> str:
    stats = report.stats
    return (
        f"{title} ({report.difficulty.label}): "
        f"{format_distance_km(stats.distance_km)}, "
        f"{format_elevation(stats.elevation_gain_m, '+')}, "
        f"{format_elevation(stats.elevation_loss_m, '-')}, "
        f"equiv. {stats.equivalent_km:.2f} km, "
        f"{format_time_hours(stats.hours)}"
    )


def _echo_report(engine: SegmentationEngine) -> None:
    effort = engine.settings
    click.echo(
        f"{engine.point_count} points, {len(engine.markers)} markers "
        f"(fitness {effort.fitness_level}, backpack {effort.backpack_weight_kg:g} kg)"
    )

    reports = engine.get_segment_reports()
    if len(reports) == 1:
        click.echo(_report_line("Full track", reports[0]))
        return

    for number, report in enumerate(reports, start=1):
        segment = report.segment
        title = f"Track {number} [{segment.start_index}-{segment.end_index}]"
        if segment.marker is not None:
            title += f" -> {segment.marker.type.value}"
        click.echo(_report_line(title, report))

    total = engine.get_cumulative_stats()
    click.echo(
        f"Total (cumulative): {format_distance_km(total.distance_km)}, "
        f"{format_elevation(total.elevation_gain_m, '+')}, "
        f"{format_elevation(total.elevation_loss_m, '-')}, "
        f"equiv. {total.equivalent_km:.2f} km, "
        f"{format_time_hours(total.hours)}"
    )


# Shared options
_split_option = click.option(
    "--split", "splits", multiple=True,
    help="Marker at a point index, optionally typed: 120 or 340:hotel"
)
_fitness_option = click.option(
    "--fitness", type=click.IntRange(1, 5), default=None,
    help="Fitness level 1-5 (overrides stored settings)"
)
_backpack_option = click.option(
    "--backpack", type=click.FloatRange(min=0), default=None,
    help="Backpack weight in kg (overrides stored settings)"
)
_settings_file_option = click.option(
    "--settings-file", type=click.Path(dir_okay=False, path_type=Path),
    default=lambda: settings.settings_file, show_default="from config",
    help="Settings store file"
)


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from config)")
def cli(log_level):
    """Trail segmentation and hiking effort estimation."""
    _setup_logging(log_level or settings.log_level)


@cli.command()
@click.argument("gpx_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_split_option
@_fitness_option
@_backpack_option
@_settings_file_option
def segments(gpx_file, splits, fitness, backpack, settings_file):
    """Print per-segment statistics for a GPX track."""
    try:
        engine = _build_engine(gpx_file, splits, _effort_settings(settings_file, fitness, backpack))
    except TrailSplitError as e:
        raise click.ClickException(str(e))
    _echo_report(engine)


@cli.command()
@click.argument("gpx_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_split_option
@click.option(
    "--output-dir", type=click.Path(file_okay=False, path_type=Path),
    default=lambda: settings.project_dir, help="Directory for the project file"
)
def export(gpx_file, splits, output_dir):
    """Save a GPX track with markers as a project file."""
    try:
        engine = _build_engine(gpx_file, splits, EffortSettings())
        content = engine.save()
    except TrailSplitError as e:
        raise click.ClickException(str(e))

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / project_filename()
    path.write_text(content, encoding="utf-8")
    logger.info(f"Project written to {path}")
    click.echo(str(path))


@cli.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_fitness_option
@_backpack_option
@_settings_file_option
def show(project_file, fitness, backpack, settings_file):
    """Print per-segment statistics for a saved project."""
    engine = SegmentationEngine(_effort_settings(settings_file, fitness, backpack))
    try:
        engine.load(project_file.read_bytes())
    except TrailSplitError as e:
        raise click.ClickException(str(e))
    _echo_report(engine)


@cli.command(name="settings")
@click.option("--fitness", type=click.IntRange(1, 5), default=None, help="Fitness level 1-5")
@click.option("--backpack", type=click.FloatRange(min=0), default=None, help="Backpack weight in kg")
@_settings_file_option
def settings_command(fitness, backpack, settings_file):
    """Show or update stored effort settings."""
    repo = SettingsRepository(settings_file)
    effort = _effort_settings(settings_file, fitness, backpack)
    if fitness is not None or backpack is not None:
        repo.set(effort)

    click.echo(f"fitness_level: {effort.fitness_level}")
    click.echo(f"backpack_weight_kg: {effort.backpack_weight_kg:g}")


if __name__ == "__main__":
    cli()
