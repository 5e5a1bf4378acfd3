"""Command-line entrypoints for ZieglerSim."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

import typer

from zieglersim.errors import ZieglerSimError
from zieglersim.kinetics import ArrheniusKinetics, KineticConstantTable, StepKind
from zieglersim.mechanism import evaluate_rates
from zieglersim.models import ReactorState, SiteState
from zieglersim.parameters import DEFAULT_TABLE
from zieglersim.thermo import PureComponentCorrelator
from zieglersim.units import UnitType, convert

app = typer.Typer(add_completion=False)

REFERENCE_STATE = ReactorState(
    temperature=363.15,
    volume=100000.0,
    ethylene=0.08,
    hexene=0.02,
    hydrogen=0.005,
    catalyst=1e-4,
    cr6=0.0,
    cocatalyst=0.01,
    sites=(
        SiteState(*([1e-7] * 6)),
        SiteState(*([1e-7] * 6)),
    ),
    reactor_type=1,
)


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option(help="Logging level (DEBUG, INFO, WARNING, ...).")
    ] = "WARNING",
) -> None:
    """Ziegler-Natta copolymerisation rate engine."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _parse_state(data: Dict[str, Any]) -> ReactorState:
    sites_data = data.get("sites", [{}, {}])
    sites = tuple(SiteState(**{k: float(v) for k, v in site.items()}) for site in sites_data)
    bulk = {
        name: float(data.get(name, 0.0))
        for name in ("ethylene", "hexene", "hydrogen", "catalyst", "cr6", "cocatalyst")
    }
    return ReactorState(
        temperature=float(data["temperature"]),
        volume=float(data["volume"]),
        reactor_type=int(data.get("reactor_type", 1)),
        sites=sites,
        **bulk,
    )


def _parse_table(entries: List[Dict[str, Any]]) -> KineticConstantTable:
    overrides = {}
    for entry in entries:
        step = StepKind(entry["step"].lower())
        key = (step, int(entry.get("site", 0)), str(entry.get("index", "")))
        overrides[key] = ArrheniusKinetics(a=float(entry["a"]), b=float(entry["b"]))
    return DEFAULT_TABLE.replace(overrides)


def _emit(payload: Dict[str, Any], output: Optional[Path]) -> None:
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)
    if output:
        with open(output, "w") as f:
            f.write(json_output)


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def rates(
    state_file: Annotated[
        Path, typer.Argument(help="Path to JSON reactor-state file.")
    ],
    constants: Annotated[
        Optional[Path], typer.Option(help="JSON list of kinetic parameter overrides.")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Evaluate reaction rates for a reactor state."""
    with open(state_file, "r") as f:
        state_data = json.load(f)

    table = DEFAULT_TABLE
    try:
        if constants is not None:
            with open(constants, "r") as f:
                table = _parse_table(json.load(f))
        state = _parse_state(state_data)
        result = evaluate_rates(state, table)
    except (ZieglerSimError, KeyError, TypeError, ValueError) as exc:
        _fail(exc)

    _emit(result.as_dict(), output)


@app.command()
def demo(
    output: Annotated[
        Optional[Path], typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Evaluate rates for the reference ethylene / 1-hexene reactor state."""
    _emit(evaluate_rates(REFERENCE_STATE).as_dict(), output)


@app.command()
def properties(
    components: Annotated[
        List[str], typer.Argument(help="Component names, e.g. ETHYLENE 1-HEXENE.")
    ],
    temperature: Annotated[float, typer.Option(help="Temperature value.")],
    unit: Annotated[str, typer.Option(help="Temperature unit: K, C or F.")] = "K",
) -> None:
    """Print correlated pure-component properties at one temperature."""
    try:
        kelvin = convert(temperature, unit, "K", UnitType.TEMPERATURE)
        payload = PureComponentCorrelator().properties_for(components, kelvin)
    except ZieglerSimError as exc:
        _fail(exc)
    _emit({"temperature_K": kelvin, "components": payload}, None)


if __name__ == "__main__":
    app()
