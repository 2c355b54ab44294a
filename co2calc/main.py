"""
main.py – CLI entry point for the trip CO₂ calculator.

Usage
-----
List known cities:
    python -m co2calc.main cities

Look up a distance:
    python -m co2calc.main distance --origin "São Paulo, SP" --destination "Rio de Janeiro, RJ"

Full calculation (route table or manual distance):
    python -m co2calc.main calculate --origin "São Paulo, SP" \\
        --destination "Rio de Janeiro, RJ" --mode bus
    python -m co2calc.main calculate --origin "Lisboa" --destination "Porto" \\
        --mode car --distance 313

Compare every mode for a distance:
    python -m co2calc.main compare --distance 430 --mode truck

Carbon credits for an emission:
    python -m co2calc.main credits --emission 51.6

Common options:
    --routes-file routes.json
    --verbose
"""
from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from co2calc.config import CalculatorConfig, get_config
from co2calc.constants import DISTANCE_STATUS_FOUND, TransportMode
from co2calc.errors import CalculatorError, RouteNotFoundError
from co2calc.presenter import (
    distance_hint,
    format_number,
    render_comparison,
    render_credits,
    render_results,
)
from co2calc.service import Components, calculate_trip, resolve_distance
from co2calc.validators import parse_distance

console = Console()
log = logging.getLogger(__name__)

_MODE_CHOICES = [m.value for m in TransportMode]


# ─────────────────────────────────────────────────────────────
# Rendering helpers
# ─────────────────────────────────────────────────────────────

def _print_comparison(results, selected) -> None:
    """Render a rich table of every mode for one distance."""
    view = render_comparison(results, selected)
    table = Table(title="Comparação entre modos de transporte", show_lines=True)
    table.add_column("Modo", style="bold")
    table.add_column("kg CO₂", justify="right")
    table.add_column("% vs carro", justify="right")
    table.add_column("", justify="left")

    for item in view.items:
        name = f"{item.mode.icon} {item.mode.label}"
        if item.selected:
            name += "  [green]✓ Selecionado[/]"
        bar = "█" * int(item.bar_width // 5)
        table.add_row(
            name,
            item.emission,
            item.percentage_vs_car,
            f"[{item.bar_color}]{bar}[/]",
        )
    console.print(table)
    console.print(f"[bold]💡 Dica:[/] {view.tip}")


def _print_credits(estimate, kg_per_credit: float) -> None:
    view = render_credits(estimate, kg_per_credit)
    table = Table(title="Créditos de carbono")
    table.add_column("Créditos necessários", justify="right", style="cyan")
    table.add_column("Valor estimado", justify="right", style="green")
    table.add_column("Variação", justify="right")
    table.add_row(view.credits, view.price_average, view.price_range)
    console.print(table)
    console.print(f"[dim]{view.helper}[/]")


def _load(args: argparse.Namespace) -> tuple[CalculatorConfig, Components] | None:
    try:
        config = get_config(routes_file=args.routes_file)
    except EnvironmentError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        return None
    if not args.verbose:
        logging.getLogger().setLevel(config.log_level)
    return config, Components.from_config(config)


# ─────────────────────────────────────────────────────────────
# CLI commands
# ─────────────────────────────────────────────────────────────

def cmd_cities(args: argparse.Namespace) -> int:
    """Handle: python -m co2calc.main cities"""
    loaded = _load(args)
    if loaded is None:
        return 1
    _, components = loaded

    cities = components.routes.list_cities()
    table = Table(title=f"Cidades ({len(cities)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Cidade", style="cyan")
    for i, city in enumerate(cities, 1):
        table.add_row(str(i), city)
    console.print(table)
    return 0


def cmd_distance(args: argparse.Namespace) -> int:
    """Handle: python -m co2calc.main distance --origin ... --destination ..."""
    loaded = _load(args)
    if loaded is None:
        return 1
    _, components = loaded

    lookup = resolve_distance(components.routes, args.origin, args.destination)
    hint = distance_hint(lookup)
    if lookup.status == DISTANCE_STATUS_FOUND:
        console.print(f"[bold]{hint.distance} km[/]  [green]{hint.message}[/]")
        return 0
    console.print(f"[yellow]{hint.message}[/]")
    return 1


def cmd_calculate(args: argparse.Namespace) -> int:
    """Handle: python -m co2calc.main calculate --origin ... --destination ... --mode ..."""
    loaded = _load(args)
    if loaded is None:
        return 1
    config, components = loaded

    request = {
        "origin": args.origin,
        "destination": args.destination,
        "mode": args.mode,
        "distance_km": args.distance,
    }
    try:
        calc = calculate_trip(request, components)
    except RouteNotFoundError as exc:
        console.print(f"[yellow]{exc}.[/] Use --distance to enter it manually.")
        return 1
    except CalculatorError as exc:
        console.print(f"[red]Error:[/] {exc}")
        return 1

    view = render_results(calc)
    lines = [
        f"[bold]{view.route}[/]",
        f"Distância: [cyan]{view.distance} km[/] ({calc.distance_source})",
        f"Emissão de CO₂: [red]🍃 {view.emission} kg CO₂[/]",
        f"Modo de transporte: {view.mode.icon} {view.mode.label}",
    ]
    if view.savings is not None:
        lines.append(
            f"Economia: [green]{view.savings.saved_kg} kg[/] economizados "
            f"([green]{view.savings.percentage}%[/] menos que "
            f"{view.savings.baseline_label.lower()})"
        )
    console.print(Panel("\n".join(lines), title="Resultado", style="blue"))

    _print_comparison(calc.comparison, calc.mode)
    _print_credits(calc.credits, config.credits.kg_per_credit)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handle: python -m co2calc.main compare --distance ..."""
    loaded = _load(args)
    if loaded is None:
        return 1
    _, components = loaded

    try:
        distance_km = parse_distance(args.distance)
        results = components.comparison.all_modes(distance_km)
        _print_comparison(results, args.mode)
    except CalculatorError as exc:
        console.print(f"[red]Error:[/] {exc}")
        return 1
    console.print(f"[dim]Distância: {format_number(distance_km, 1)} km[/]")
    return 0


def cmd_credits(args: argparse.Namespace) -> int:
    """Handle: python -m co2calc.main credits --emission ..."""
    loaded = _load(args)
    if loaded is None:
        return 1
    config, components = loaded

    try:
        estimate = components.credits.estimate(args.emission)
    except CalculatorError as exc:
        console.print(f"[red]Error:[/] {exc}")
        return 1
    _print_credits(estimate, config.credits.kg_per_credit)
    return 0


# ─────────────────────────────────────────────────────────────
# Argument parsing
# ─────────────────────────────────────────────────────────────

def _build_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by every sub-command."""
    parser.add_argument(
        "--routes-file",
        default=None,
        dest="routes_file",
        help="JSON file of routes replacing the built-in table (default: CO2CALC_ROUTES_FILE)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log each calculation step",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser."""
    root = argparse.ArgumentParser(
        prog="python -m co2calc.main",
        description="Trip CO₂ emission calculator – local CLI tool.",
    )
    sub = root.add_subparsers(dest="command", required=True)

    # ── cities ─────────────────────────────────────────────────
    p_cities = sub.add_parser("cities", help="List every city in the route table.")
    _build_shared_args(p_cities)

    # ── distance ───────────────────────────────────────────────
    p_distance = sub.add_parser("distance", help="Look up the distance between two cities.")
    p_distance.add_argument("--origin", required=True, help='e.g. "São Paulo, SP"')
    p_distance.add_argument("--destination", required=True, help='e.g. "Rio de Janeiro, RJ"')
    _build_shared_args(p_distance)

    # ── calculate ──────────────────────────────────────────────
    p_calc = sub.add_parser("calculate", help="Emission, comparison and credits for a trip.")
    p_calc.add_argument("--origin", required=True)
    p_calc.add_argument("--destination", required=True)
    p_calc.add_argument("--mode", required=True, choices=_MODE_CHOICES)
    p_calc.add_argument(
        "--distance",
        default=None,
        help="Distance in km; skips the route table (accepts 1.234,5)",
    )
    _build_shared_args(p_calc)

    # ── compare ────────────────────────────────────────────────
    p_compare = sub.add_parser("compare", help="Compare every mode for a distance.")
    p_compare.add_argument("--distance", required=True, help="Distance in km")
    p_compare.add_argument(
        "--mode",
        default=TransportMode.CAR.value,
        choices=_MODE_CHOICES,
        help="Mode to highlight (default: car)",
    )
    _build_shared_args(p_compare)

    # ── credits ────────────────────────────────────────────────
    p_credits = sub.add_parser("credits", help="Carbon credits needed to offset an emission.")
    p_credits.add_argument("--emission", required=True, type=float, help="kg CO₂")
    _build_shared_args(p_credits)

    return root


# ─────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the correct sub-command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )

    dispatch = {
        "cities": cmd_cities,
        "distance": cmd_distance,
        "calculate": cmd_calculate,
        "compare": cmd_compare,
        "credits": cmd_credits,
    }
    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(handler(args))


if __name__ == "__main__":
    main()
