"""Command-line entrypoint: load one stock and print the dashboard header and summary."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path

# --- Ensure src is on path for local imports ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from rich.console import Console  # noqa: E402
from rich.table import Table  # noqa: E402

from stock_dash import TimeFrame, UiState  # noqa: E402
from stock_dash.config import load_config  # noqa: E402
from stock_dash.domain import as_utc  # noqa: E402
from stock_dash.data import YFinancePricesProvider  # noqa: E402
from stock_dash.services import App  # noqa: E402
from stock_dash.utils import DataRetrievalError, ParseTimeFrameError, configure_logging, get_logger  # noqa: E402
from stock_dash.viz import run_layout_pass, time_frame_label  # noqa: E402

logger = get_logger(__name__)


def _time_frame_arg(text: str) -> TimeFrame:
    try:
        return TimeFrame.parse(text)
    except ParseTimeFrameError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def _date_arg(text: str) -> datetime:
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid date: {text!r}") from err


def build_parser() -> argparse.ArgumentParser:
    codes = ", ".join(tf.display_code for tf in TimeFrame)
    parser = argparse.ArgumentParser(description="Stock price history dashboard")
    parser.add_argument("symbol", nargs="?", help="ticker symbol (defaults to config)")
    parser.add_argument("-t", "--time-frame", type=_time_frame_arg, help=f"one of {codes}")
    parser.add_argument("-c", "--config", help="path to a YAML config file")
    window = parser.add_mutually_exclusive_group()
    window.add_argument("--before", type=_date_arg, help="load the window ending the day before DATE")
    window.add_argument("--after", type=_date_arg, help="load the window starting the day after DATE")
    parser.add_argument("--debug-draw", action="store_true", help="print target areas")
    return parser


def render(console: Console, app: App) -> None:
    ui_state = app.ui_state
    stock = app.stock
    run_layout_pass(ui_state, stock.display_name, stock.symbol, console.size.width)

    date_range = ui_state.date_range
    window = f"{date_range.start:%Y-%m-%d} .. {date_range.end:%Y-%m-%d}" if date_range else "latest"
    console.print(
        f"[bold]{stock.display_name}[/bold] ({stock.symbol})  "
        f"{time_frame_label(ui_state.time_frame)}  [dim]{window}[/dim]"
    )

    summary = stock.summary()
    if summary is None:
        console.print("[yellow]No data returned for the selected inputs.[/yellow]")
    else:
        table = Table(show_header=True, header_style="bold")
        for column in ("From", "To", "Last", "Change", "High", "Low"):
            table.add_column(column, justify="right")
        change_pct = f" ({summary.change_pct:+.2f}%)" if summary.change_pct is not None else ""
        table.add_row(
            f"{summary.start_date}",
            f"{summary.end_date}",
            f"{summary.last_close:.2f}",
            f"{summary.change:+.2f}{change_pct}",
            f"{summary.high:.2f}",
            f"{summary.low:.2f}",
        )
        console.print(table)

    if ui_state.debug_draw:
        for target, rect in ui_state.target_area_snapshot().items():
            console.print(f"[dim]{target.name:<20} {rect}[/dim]")


def shift_window(ui_state: UiState, before: datetime | None, after: datetime | None) -> str | None:
    """Apply --before/--after to the active time frame. Returns a notice for the user, if any."""
    if before is not None:
        ui_state.shift_date_range_before(before)
        return None
    if after is not None and ui_state.shift_date_range_after(after) is None:
        return (
            f"The {ui_state.time_frame} window after {after:%Y-%m-%d} reaches past today; "
            "showing the latest period instead."
        )
    return None


async def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    configure_logging(config.log.level)

    ui_state = UiState.from_config(config)
    if args.time_frame is not None:
        ui_state.set_time_frame(args.time_frame)
    if args.debug_draw:
        ui_state.set_debug_draw(True)

    app = App(ui_state, YFinancePricesProvider())
    symbol = args.symbol or config.dashboard.symbol
    console = Console()

    try:
        await app.load_stock(symbol)
        if args.before or args.after:
            if ui_state.time_frame.duration is None:
                console.print(f"[red]{ui_state.time_frame} has no fixed window to shift.[/red]")
                return 2
            notice = shift_window(ui_state, args.before, args.after)
            if notice:
                logger.info(notice)
                console.print(f"[yellow]{notice}[/yellow]")
            await app.load_historical_prices()
    except DataRetrievalError as err:
        logger.error("Failed to load %s: %s", symbol, err)
        console.print(f"[red]Failed to fetch data: {err}[/red]")
        return 1

    render(console, app)
    return 0


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    try:
        code = asyncio.run(run(args))
    except ValueError as err:
        parser.error(str(err))
    sys.exit(code)


if __name__ == "__main__":
    main()
