from __future__ import annotations

"""Command line interface for swaragraph using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
from pydantic import ValidationError

from ._typer import bad_parameter, reject
from .config import Settings, load_settings
from .core import (
    CardBoard,
    UploadStatus,
    cents_to_hz,
    hz_to_cents,
    numeric_tick_labels,
    swara_ticks,
    widen_domain,
)
from .core.pipeline import Display
from .export.to_numpy import display_to_numpy
from .ingest import PitchFileError, read_pitch_file
from .utils.logging import get_logger
from .viz import available_charts, get_chart

app = typer.Typer(help="Pitch contour windows, cents conversion and swara axes")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            bad_parameter(f"invalid JSON override value: {raw}")
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys[:-1]:
        if not hasattr(current, key):
            bad_parameter(f"unknown configuration key: {'.'.join(keys)}", param_hint="--set")
        current = getattr(current, key)
    if not hasattr(current, keys[-1]):
        bad_parameter(f"unknown configuration key: {'.'.join(keys)}", param_hint="--set")


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _settings(ctx: typer.Context) -> Settings:
    cfg = ctx.obj
    return cfg if isinstance(cfg, Settings) else Settings()


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. axis.pixel_height=400",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        bad_parameter(f"configuration file not found: {config}", param_hint="--config")

    try:
        settings = load_settings(config) if config else Settings()
    except (FileNotFoundError, RuntimeError, TypeError, json.JSONDecodeError, ValidationError) as exc:
        bad_parameter(f"failed to load configuration: {exc}", param_hint="--config")

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                bad_parameter(
                    "overrides must be of the form --set section.key=value", param_hint="--set"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                bad_parameter("override key cannot be empty", param_hint="--set")
            keys = key.split(".")
            _ensure_path(settings, keys)
            value = _parse_override_value(raw_value)
            _apply_override(data, keys, value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            bad_parameter(f"invalid configuration override: {exc}", param_hint="--set")

    get_logger("swaragraph", "debug" if verbose else settings.logging.level)
    ctx.obj = settings


def _load_or_exit(path: Path, settings: Settings):
    try:
        return read_pitch_file(path, settings=settings)
    except PitchFileError as exc:
        reject(Path(exc.path).name, exc.reason)


@app.command()
def inspect(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False),
) -> None:
    """Report the number of samples and the time/pitch ranges of a file."""

    cfg = _settings(ctx)
    series = _load_or_exit(path, cfg)
    t0, t1 = series.time_range
    typer.echo(
        f"{path.name}: {len(series)} samples, "
        f"time {t0:g}..{t1:g} s, pitch {series.values.min():g}..{series.values.max():g} Hz"
    )


@app.command()
def window(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False),
    start: Optional[str] = typer.Option(None, "--start", "-s", help="Window start (s or MM:SS)"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="Window end (s or MM:SS)"),
    tonic: Optional[str] = typer.Option(None, "--tonic", "-t", help="Tonic in Hz"),
    y_axis: Optional[str] = typer.Option(None, "--y-axis", help="numeric or swaras"),
    snap: Optional[bool] = typer.Option(None, "--snap/--no-snap", help="Fall back to nearest samples"),
    export: Optional[Path] = typer.Option(None, "--export", help="Write points to .csv or .npz"),
) -> None:
    """Print the points and value ticks of one window of a pitch file."""

    cfg = _settings(ctx)
    if y_axis is not None and y_axis not in ("numeric", "swaras"):
        bad_parameter("y-axis must be 'numeric' or 'swaras'", param_hint="--y-axis")
    if snap is not None:
        cfg = cfg.model_copy(
            update={"window": cfg.window.model_copy(update={"snap_to_nearest": snap})}
        )

    board = CardBoard(cfg)
    card = board.add(title=path.name)
    state = board.slot(card.card_id).load(path)
    if state.status is UploadStatus.REJECTED:
        reject(path.name, state.reason)
    changes: Dict[str, object] = {}
    if start is not None or end is not None or cfg.window.start is None:
        board.fit_window(card.card_id, start, end)
    if tonic is not None:
        changes["tonic"] = tonic
    if y_axis is not None:
        changes["y_axis"] = y_axis
    if changes:
        board.update(card.card_id, **changes)

    display = board.derive(card.card_id)
    typer.echo(get_chart("table").render({path.name: display}, time_label="time"))

    if export is not None:
        if export.suffix.lower() == ".npz":
            display_to_numpy(display, save_npz=export)
        else:
            display_to_numpy(display, save_csv=export)
        typer.echo(f"exported {len(display.points)} points to {export}")


@app.command()
def ticks(
    ctx: typer.Context,
    minimum: float = typer.Option(..., "--min", help="Lowest value on the axis"),
    maximum: float = typer.Option(..., "--max", help="Highest value on the axis"),
    swaras: bool = typer.Option(False, "--swaras", help="Swara ticks (values in cents)"),
    count: Optional[int] = typer.Option(None, "--count", help="Numeric tick intervals"),
    spacing: Optional[float] = typer.Option(None, "--spacing", help="Minimum pixel gap between swaras"),
    height: Optional[float] = typer.Option(None, "--height", help="Axis height in pixels"),
    precision: Optional[int] = typer.Option(None, "--precision", help="Decimals for numeric labels"),
    tonic: Optional[float] = typer.Option(
        None, "--tonic", "-t", help="With --swaras, also print each tick in Hz above this tonic"
    ),
) -> None:
    """Print value-axis ticks for a domain."""

    axis = _settings(ctx).axis
    count = axis.numeric_tick_count if count is None else count
    spacing = axis.min_pixel_spacing if spacing is None else spacing
    height = axis.pixel_height if height is None else height
    precision = axis.value_precision if precision is None else precision

    lo, hi = widen_domain(minimum, maximum, axis.epsilon)
    if swaras:
        labels = swara_ticks(lo, hi, spacing, height)
    else:
        labels = numeric_tick_labels(lo, hi, count, precision)
    if tonic is not None and not (swaras and hz_to_cents(1.0, tonic) is not None):
        bad_parameter("--tonic needs --swaras and a positive frequency", param_hint="--tonic")
    for tick in labels:
        if tonic is None:
            typer.echo(f"{tick.position:g}\t{tick.label}")
        else:
            hz = cents_to_hz(tick.position, tonic)
            typer.echo(f"{tick.position:g}\t{tick.label}\t{hz:.2f} Hz")


@app.command()
def plot(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(..., exists=True, dir_okay=False),
    windows: List[str] = typer.Option(
        [], "--window", "-w", help="START:END per card, e.g. 0:2.5 (repeatable)"
    ),
    tonic: Optional[str] = typer.Option(None, "--tonic", "-t", help="Tonic in Hz"),
    y_axis: Optional[str] = typer.Option(None, "--y-axis", help="numeric or swaras"),
    shared: bool = typer.Option(
        False, "--shared/--no-shared", help="Use the first file for every window"
    ),
    adapter: Optional[str] = typer.Option(None, "--adapter", "-a", help="Chart adapter name"),
    save: Optional[Path] = typer.Option(None, "--save", help="Output path for the chart"),
    show: Optional[bool] = typer.Option(None, "--show/--no-show"),
) -> None:
    """Render one card per file (or per window on a shared file)."""

    cfg = _settings(ctx)
    if y_axis is not None and y_axis not in ("numeric", "swaras"):
        bad_parameter("y-axis must be 'numeric' or 'swaras'", param_hint="--y-axis")
    adapter_name = adapter or cfg.viz.adapter
    try:
        chart = get_chart(adapter_name)
    except KeyError:
        bad_parameter(
            f"unknown adapter {adapter_name!r}; choose from {', '.join(available_charts())}",
            param_hint="--adapter",
        )

    spans = [_split_window(w) for w in windows]
    if shared:
        if len(paths) > 1:
            bad_parameter("--shared takes exactly one FILE", param_hint="PATHS")
        n_cards = max(len(spans), 1)
    else:
        n_cards = len(paths)
        if spans and len(spans) not in (1, n_cards):
            bad_parameter("give one --window or one per file", param_hint="--window")

    if n_cards > cfg.cards.max_cards:
        bad_parameter(f"at most {cfg.cards.max_cards} cards are supported", param_hint="--window")

    board = CardBoard(cfg, shared=shared)
    if shared:
        state = board.shared_slot.load(paths[0])
        if state.status is UploadStatus.REJECTED:
            reject(paths[0].name, state.reason)

    displays: Dict[str, Display] = {}
    for i in range(n_cards):
        title = f"Pitch Graph {i + 1}"
        fields: Dict[str, object] = {"title": title}
        if tonic is not None:
            fields["tonic"] = tonic
        if y_axis is not None:
            fields["y_axis"] = y_axis
        card = board.add(**fields)
        if not shared:
            state = board.slot(card.card_id).load(paths[i])
            if state.status is UploadStatus.REJECTED:
                reject(paths[i].name, state.reason)
        if spans:
            board.fit_window(card.card_id, *spans[i if len(spans) > 1 else 0])
        elif cfg.window.start is None:
            board.fit_window(card.card_id)
        displays[title] = board.derive(card.card_id)

    logger.debug("rendering %d cards with the %s adapter", len(displays), chart.name)
    result = chart.render(
        displays,
        title=cfg.viz.title,
        time_label=cfg.viz.time_label,
        save=save or cfg.viz.save,
        show=cfg.viz.show if show is None else show,
    )
    if isinstance(result, str):
        typer.echo(result)
    elif save or cfg.viz.save:
        typer.echo(f"saved chart to {save or cfg.viz.save}")


def _split_window(text: str) -> tuple[str, str]:
    if "," in text:
        start, end = text.split(",", 1)
    else:
        # START:END, where either side may itself be MM:SS
        parts = text.split(":")
        if len(parts) % 2:
            bad_parameter(f"window must look like START:END, got {text!r}", param_hint="--window")
        half = len(parts) // 2
        start, end = ":".join(parts[:half]), ":".join(parts[half:])
    return start, end


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
